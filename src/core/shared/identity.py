"""
Generador de identificadores.

Emula el AUTO_INCREMENT de una tabla: cada repositorio tiene su propio
generador y los IDs emitidos son enteros estrictamente crecientes.
"""

import threading


class IdentifierGenerator:
    """
    Emite IDs únicos y estrictamente crecientes.

    La emisión es atómica: varios hilos pueden llamar a ``next()``
    a la vez sin recibir el mismo valor.

    Example:
        generator = IdentifierGenerator(start=7)
        generator.next()  # 7
        generator.next()  # 8
    """

    def __init__(self, start: int = 1):
        self._next = start
        self._lock = threading.Lock()

    def next(self) -> int:
        """Devuelve el siguiente ID."""
        with self._lock:
            value = self._next
            self._next += 1
            return value

    def reserve(self, value: int) -> None:
        """
        Garantiza que los próximos IDs sean mayores que ``value``.

        Se usa cuando una entidad llega con un ID elegido por el
        llamador, para que un ID automático posterior no coincida.
        """
        with self._lock:
            if value >= self._next:
                self._next = value + 1

    def peek(self) -> int:
        """Valor que devolverá la próxima llamada a ``next()``."""
        with self._lock:
            return self._next

    def __repr__(self) -> str:
        return f"IdentifierGenerator(next={self._next})"
