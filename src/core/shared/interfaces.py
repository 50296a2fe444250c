"""
Interfaces (Ports) - Contratos entre Core y Adapters.

El core define las interfaces; las implementaciones (en memoria hoy)
las cumplen por duck typing. El flujo de dependencias siempre apunta
hacia el core.
"""

from typing import List, Optional, Protocol, TypeVar


# Type variable para entidades genéricas
T = TypeVar("T")


class Entity(Protocol):
    """Cualquier entidad con identificador entero asignable."""

    id: Optional[int]


class Repository(Protocol[T]):
    """
    Interfaz genérica para repositorios.

    Define las operaciones básicas que todo repositorio de
    Cliente, Tecnico o Solicitud debe ofrecer.

    Type Parameters:
        T: Tipo de la entidad gestionada

    Note:
        Usando Protocol para permitir duck typing.
        Las implementaciones no necesitan heredar explícitamente.
    """

    def find_all(self) -> List[T]:
        """
        Lista todas las entidades.

        Returns:
            Copia de la lista, en orden de inserción
        """
        ...

    def find_by_id(self, entity_id: int) -> Optional[T]:
        """
        Busca una entidad por ID.

        Args:
            entity_id: Identificador único

        Returns:
            Entidad encontrada o None

        Raises:
            ValidationError: Si entity_id es None
        """
        ...

    def save(self, entity: T) -> T:
        """
        Persiste una entidad nueva, asignando ID si no lo tiene.

        Raises:
            ValidationError: Si entity es None
            DuplicateIdentifierError: Si el ID ya existe
        """
        ...

    def update(self, entity: T) -> T:
        """
        Reemplaza la entidad almacenada con el mismo ID.

        Raises:
            ValidationError: Si entity es None
            EntityNotFoundError: Si no existe entidad con ese ID
        """
        ...

    def delete_by_id(self, entity_id: int) -> None:
        """
        Elimina la entidad; no hace nada si no existe.

        Raises:
            ValidationError: Si entity_id es None
        """
        ...

    def exists_by_id(self, entity_id: int) -> bool:
        """Verifica si existe una entidad con ese ID."""
        ...

    def count(self) -> int:
        """Número total de entidades."""
        ...
