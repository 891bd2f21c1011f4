"""
Componentes de gráficos para la interfaz de usuario.

Este módulo proporciona componentes Streamlit reutilizables para resumir
los cajeros encontrados.

Componentes principales:
    - bank_counts: Cantidad de cajeros por banco y red
    - atm_results_summary: Gráfico y tabla de los cajeros visibles
"""

import streamlit as st
import pandas as pd
import plotly.express as px

from api.utils.helpers import atms_to_dataframe

NETWORK_COLORS = {'LINK': '#4e73df', 'BANELCO': '#e74a3b'}

def bank_counts(atms):
    """
    Cuenta los cajeros por banco y red.

    Args:
        atms: Lista de ATM

    Returns:
        DataFrame con columnas Banco, Red y Cantidad, ordenado por cantidad
    """
    if not atms:
        return pd.DataFrame(columns=['Banco', 'Red', 'Cantidad'])

    atms_df = atms_to_dataframe(atms)
    counts = atms_df.groupby(['bank', 'network']).size().reset_index(name='Cantidad')
    counts.columns = ['Banco', 'Red', 'Cantidad']
    return counts.sort_values(['Cantidad', 'Banco'], ascending=[False, True]).reset_index(drop=True)

def atm_results_summary(atms):
    """
    Muestra un resumen de los cajeros encontrados.

    Args:
        atms: Lista de ATM visibles en el mapa
    """
    st.metric("Cajeros encontrados", len(atms) if atms else 0)

    if not atms:
        return

    counts = bank_counts(atms)

    fig = px.bar(
        counts,
        x='Banco',
        y='Cantidad',
        color='Red',
        color_discrete_map=NETWORK_COLORS,
        text='Cantidad',
        title='Cajeros por Banco'
    )

    fig.update_layout(
        xaxis_title='',
        yaxis_title='Cantidad de Cajeros',
        height=300
    )

    st.plotly_chart(fig, use_container_width=True)

    with st.expander("Ver cajeros"):
        display_df = atms_to_dataframe(atms)[['bank', 'network', 'address']]
        display_df.columns = ['Banco', 'Red', 'Dirección']
        st.dataframe(display_df, use_container_width=True)
