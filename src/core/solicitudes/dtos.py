"""
Data Transfer Objects (DTOs) del Dominio de Solicitudes.

- SolicitudInputDTO: referencia cliente y técnico por ID
- SolicitudOutputDTO: incluye las instantáneas de cliente y técnico
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from src.core.clientes.dtos import ClienteOutputDTO
from src.core.tecnicos.dtos import TecnicoOutputDTO

from .entities import Solicitud


@dataclass(frozen=True)
class SolicitudInputDTO:
    """
    DTO de entrada para crear o reemplazar una solicitud.

    Attributes:
        descripcion: Descripción del problema
        cliente_id: ID del cliente que la abre
        estado: Estado (None o en blanco = PENDING)
        tecnico_id: ID del técnico asignado (opcional)
        titulo: Título corto (opcional)
    """

    descripcion: Optional[str] = None
    cliente_id: Optional[int] = None
    estado: Optional[str] = None
    tecnico_id: Optional[int] = None
    titulo: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "descripcion": self.descripcion,
            "cliente_id": self.cliente_id,
            "estado": self.estado,
            "tecnico_id": self.tecnico_id,
            "titulo": self.titulo,
        }


@dataclass
class SolicitudOutputDTO:
    """DTO de salida completo de una solicitud."""

    id: int
    descripcion: str
    estado: str
    fecha_creacion: Optional[datetime]
    cliente: Optional[ClienteOutputDTO]
    tecnico: Optional[TecnicoOutputDTO] = None
    titulo: Optional[str] = None
    asignada: bool = False

    @classmethod
    def from_entity(cls, entity: Solicitud) -> "SolicitudOutputDTO":
        return cls(
            id=entity.id,
            titulo=entity.titulo,
            descripcion=entity.descripcion,
            estado=entity.estado,
            fecha_creacion=entity.fecha_creacion,
            cliente=ClienteOutputDTO.from_entity(entity.cliente) if entity.cliente else None,
            tecnico=TecnicoOutputDTO.from_entity(entity.tecnico) if entity.tecnico else None,
            asignada=entity.esta_asignada,
        )

    def to_dict(self) -> dict:
        """Convierte a diccionario (serialización JSON)."""
        return {
            "id": self.id,
            "titulo": self.titulo,
            "descripcion": self.descripcion,
            "estado": self.estado,
            "fecha_creacion": self.fecha_creacion.isoformat() if self.fecha_creacion else None,
            "cliente": self.cliente.to_dict() if self.cliente else None,
            "tecnico": self.tecnico.to_dict() if self.tecnico else None,
            "asignada": self.asignada,
        }
