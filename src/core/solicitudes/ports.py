"""
Ports (Interfaces) del Dominio de Solicitudes.
"""

from typing import Protocol, runtime_checkable

from src.core.shared.interfaces import Repository
from src.core.shared.repository import InMemoryRepository

from .entities import Solicitud


@runtime_checkable
class SolicitudRepository(Repository[Solicitud], Protocol):
    """
    Interfaz para persistencia de Solicitudes.

    Solo el CRUD genérico: las solicitudes no tienen búsquedas propias.
    """


class InMemorySolicitudRepository(InMemoryRepository[Solicitud]):
    """Implementación en memoria del SolicitudRepository."""

    entity_type = "Solicitud"
