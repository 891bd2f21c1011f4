"""
Utilidades para la interfaz de usuario.

Este módulo proporciona funciones auxiliares específicas para la
interfaz de usuario en Streamlit.

Funciones principales:
    - run_async: Ejecuta un evento de la pantalla y espera sus consultas
    - show_dialog: Muestra el diálogo pendiente de la pantalla
"""

import asyncio

import streamlit as st

from frontend.components.dialogs import RETRY_LABEL

def run_async(screen, handler, *args):
    """
    Ejecuta un manejador de la pantalla dentro de un event loop.

    Las consultas que programa el manejador se esperan antes de volver,
    así el rerun de Streamlit ya muestra los resultados.

    Args:
        screen: MapScreen
        handler: Método de la pantalla a ejecutar
        *args: Argumentos del manejador
    """
    async def dispatch():
        handler(*args)
        await screen.view_model.join()

    asyncio.run(dispatch())

def show_dialog(screen, key="dialog"):
    """
    Muestra el diálogo pendiente con sus botones.

    Args:
        screen: MapScreen con el atributo dialog
        key: Prefijo para las claves de los botones

    Returns:
        True si se mostró un diálogo
    """
    dialog = screen.dialog
    if dialog is None:
        return False

    if dialog.is_error:
        st.error(dialog.message)
    else:
        st.info(dialog.message)

    col1, col2 = st.columns([1, 4])
    if dialog.retry is not None:
        with col1:
            if st.button(RETRY_LABEL, key=f"{key}_retry"):
                run_async(screen, screen.retry)
                st.rerun()
    if dialog.cancelable:
        with col2:
            if st.button("Cerrar", key=f"{key}_close"):
                screen.dismiss_dialog()
                st.rerun()

    return True
