"""
Canal de publicación/suscripción para valores observables.

Cada publicación reemplaza el valor anterior y se entrega a todos los
observadores en el orden en que se suscribieron.
"""


class Observable:
    """
    Valor observable con semántica de reemplazo.

    Args:
        initial: Valor inicial, no se notifica a nadie
    """

    def __init__(self, initial=None):
        self._value = initial
        self._observers = []
        self._version = 0

    @property
    def value(self):
        return self._value

    @property
    def version(self):
        """Cantidad de publicaciones realizadas."""
        return self._version

    def observe(self, observer):
        """
        Suscribe un observador.

        El observador se llama con cada valor publicado a partir de ahora.

        Returns:
            El mismo observador, para poder desuscribirlo después
        """
        if observer not in self._observers:
            self._observers.append(observer)
        return observer

    def remove_observer(self, observer):
        if observer in self._observers:
            self._observers.remove(observer)

    def publish(self, value):
        """Reemplaza el valor actual y notifica a los observadores."""
        self._value = value
        self._version += 1
        for observer in list(self._observers):
            observer(value)
