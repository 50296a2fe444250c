"""
Lookup Index - búsquedas derivadas sobre el contenido de un repositorio.

El índice no se mantiene: se construye bajo demanda sobre una
instantánea de las entidades y se descarta después de la consulta.

Búsquedas:
- containing: subcadena sin distinguir mayúsculas (nombre)
- exact: coincidencia exacta sin distinguir mayúsculas (email, especialidad)
- distinct: valores únicos de un campo en orden de primera aparición
"""

from typing import Generic, Iterable, List, Optional, TypeVar

from .validation import require_text


T = TypeVar("T")


class LookupIndex(Generic[T]):
    """
    Consultas de solo lectura sobre una secuencia de entidades.

    Example:
        index = LookupIndex(repo.find_all())
        index.containing("nombre", "aRl")      # [Tecnico(nombre="Carlos López")]
        index.first_exact("email", "JUAN@empresa.com")
        index.distinct("especialidad")
    """

    def __init__(self, entities: Iterable[T]):
        self._entities: List[T] = list(entities)

    def containing(self, attr: str, text: str) -> List[T]:
        """
        Entidades cuyo ``attr`` contiene ``text``.

        Raises:
            ValidationError: Si ``text`` es None o está en blanco
        """
        needle = require_text(text, attr).lower()
        return [
            entity for entity in self._entities
            if needle in (getattr(entity, attr) or "").lower()
        ]

    def exact(self, attr: str, value: str) -> List[T]:
        """
        Entidades cuyo ``attr`` es igual a ``value`` ignorando mayúsculas.

        Raises:
            ValidationError: Si ``value`` es None o está en blanco
        """
        wanted = require_text(value, attr).lower()
        return [
            entity for entity in self._entities
            if (getattr(entity, attr) or "").lower() == wanted
        ]

    def first_exact(self, attr: str, value: str) -> Optional[T]:
        """Primera coincidencia de ``exact`` o None."""
        matches = self.exact(attr, value)
        return matches[0] if matches else None

    def distinct(self, attr: str) -> List[str]:
        """Valores distintos de ``attr`` conservando el primer orden visto."""
        seen = {}
        for entity in self._entities:
            value = getattr(entity, attr)
            if value is not None and value not in seen:
                seen[value] = None
        return list(seen)
