"""
Repositorio base en memoria.

Simula una tabla: una lista en orden de inserción más un generador
de IDs propio. Lo comparten los repositorios de Cliente, Tecnico y
Solicitud; cada uno agrega sus búsquedas específicas.

Garantías:
- Las entidades se copian al entrar y al salir: quien llama nunca
  comparte referencias con el almacenamiento interno.
- save, update y delete_by_id se ejecutan bajo el lock del
  repositorio; las lecturas también, así que nunca ven un estado
  intermedio.
- La emisión de IDs es atómica e independiente del lock del repositorio.
"""

import copy
import logging
import threading
from typing import Generic, List, Optional, TypeVar

from .exceptions import (
    DuplicateIdentifierError,
    EntityNotFoundError,
    ValidationError,
)
from .identity import IdentifierGenerator
from .interfaces import Entity
from .lookup import LookupIndex

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=Entity)


class InMemoryRepository(Generic[T]):
    """
    Implementación en memoria del Repository genérico.

    Subclases definen ``entity_type`` para los mensajes de error
    y agregan métodos de búsqueda usando ``lookup()``.

    Example:
        class InMemoryClienteRepository(InMemoryRepository[Cliente]):
            entity_type = "Cliente"

        repo = InMemoryClienteRepository()
        cliente = repo.save(Cliente(nombre="Juan Pérez", ...))
        cliente.id  # 1
    """

    entity_type: str = "Entidad"

    def __init__(self, id_generator: Optional[IdentifierGenerator] = None):
        self._entities: List[T] = []
        self._id_generator = id_generator or IdentifierGenerator()
        self._lock = threading.RLock()

    # =========================================================================
    # Lectura
    # =========================================================================

    def find_all(self) -> List[T]:
        """Copia de todas las entidades en orden de inserción."""
        with self._lock:
            return [copy.deepcopy(entity) for entity in self._entities]

    def find_by_id(self, entity_id: int) -> Optional[T]:
        """Busca por ID; None si no existe."""
        self._require_id(entity_id)
        with self._lock:
            position = self._position_of(entity_id)
            if position is None:
                return None
            return copy.deepcopy(self._entities[position])

    def exists_by_id(self, entity_id: int) -> bool:
        """Verifica existencia por ID."""
        self._require_id(entity_id)
        with self._lock:
            return self._position_of(entity_id) is not None

    def count(self) -> int:
        """Número de entidades almacenadas."""
        with self._lock:
            return len(self._entities)

    def lookup(self) -> LookupIndex[T]:
        """Índice de búsqueda sobre una instantánea del contenido actual."""
        return LookupIndex(self.find_all())

    # =========================================================================
    # Escritura
    # =========================================================================

    def save(self, entity: T) -> T:
        """
        Agrega una entidad nueva.

        Si la entidad no tiene ID se le asigna uno del generador.
        Si ya trae ID, no puede existir otra entidad con ese ID.

        Args:
            entity: Entidad a guardar (se le asigna ``id`` si falta)

        Returns:
            La misma entidad, con ``id`` asignado

        Raises:
            ValidationError: Si entity es None
            DuplicateIdentifierError: Si el ID ya está en uso
        """
        if entity is None:
            raise ValidationError(f"{self.entity_type} no puede ser nulo")

        with self._lock:
            if entity.id is None:
                entity.id = self._id_generator.next()
            elif self._position_of(entity.id) is not None:
                raise DuplicateIdentifierError(
                    f"Ya existe un {self.entity_type} con ID: {entity.id}",
                    entity_type=self.entity_type,
                    entity_id=entity.id,
                )
            else:
                self._id_generator.reserve(entity.id)

            self._entities.append(copy.deepcopy(entity))

        logger.debug(f"{self.entity_type} guardado - ID: {entity.id}")
        return entity

    def update(self, entity: T) -> T:
        """
        Reemplaza la entidad con el mismo ID (quitar y volver a insertar).

        Raises:
            ValidationError: Si entity o su ID es None
            EntityNotFoundError: Si no existe entidad con ese ID
        """
        if entity is None:
            raise ValidationError(f"{self.entity_type} no puede ser nulo")
        self._require_id(entity.id)

        with self._lock:
            position = self._position_of(entity.id)
            if position is None:
                raise EntityNotFoundError(
                    f"No se puede actualizar: {self.entity_type} no encontrado "
                    f"con ID: {entity.id}",
                    entity_type=self.entity_type,
                    entity_id=entity.id,
                )
            del self._entities[position]
            self._entities.append(copy.deepcopy(entity))

        logger.debug(f"{self.entity_type} actualizado - ID: {entity.id}")
        return entity

    def delete_by_id(self, entity_id: int) -> None:
        """
        Elimina por ID. Eliminar un ID inexistente no es un error.

        Raises:
            ValidationError: Si entity_id es None
        """
        self._require_id(entity_id)

        with self._lock:
            position = self._position_of(entity_id)
            if position is not None:
                del self._entities[position]

        if position is None:
            logger.debug(f"No se encontró {self.entity_type} con ID: {entity_id} para eliminar")
        else:
            logger.debug(f"{self.entity_type} eliminado - ID: {entity_id}")

    def clear(self) -> None:
        """Elimina todo el contenido (útil para tests). No reinicia los IDs."""
        with self._lock:
            self._entities.clear()

    # =========================================================================
    # Auxiliares
    # =========================================================================

    def _require_id(self, entity_id: Optional[int]) -> None:
        if entity_id is None:
            raise ValidationError("El ID no puede ser nulo", field="id")

    def _position_of(self, entity_id: int) -> Optional[int]:
        for position, entity in enumerate(self._entities):
            if entity.id == entity_id:
                return position
        return None
