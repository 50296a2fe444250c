"""
Dominio de Solicitudes - pedidos de soporte técnico.

Características del Dominio:
- Estado por defecto PENDING
- Fecha de creación fijada una única vez
- Cliente y Técnico embebidos como copias
- Reemplazo completo en update; delete falla si no existe
"""

from .entities import Solicitud, EstadoSolicitud, ESTADO_POR_DEFECTO, estado_o_defecto
from .dtos import SolicitudInputDTO, SolicitudOutputDTO
from .ports import SolicitudRepository, InMemorySolicitudRepository
from .use_cases import SolicitudService

__all__ = [
    # Entities
    "Solicitud",
    "EstadoSolicitud",
    "ESTADO_POR_DEFECTO",
    "estado_o_defecto",
    # DTOs
    "SolicitudInputDTO",
    "SolicitudOutputDTO",
    # Ports
    "SolicitudRepository",
    "InMemorySolicitudRepository",
    # Use Cases
    "SolicitudService",
]
