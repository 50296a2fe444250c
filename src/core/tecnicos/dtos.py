"""
Data Transfer Objects (DTOs) del Dominio de Técnicos.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .entities import Tecnico


@dataclass(frozen=True)
class TecnicoInputDTO:
    """
    DTO de entrada para crear o actualizar un técnico.

    En una actualización, los campos None o en blanco conservan
    el valor anterior.
    """

    nombre: Optional[str] = None
    especialidad: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "nombre": self.nombre,
            "especialidad": self.especialidad,
        }


@dataclass
class TecnicoOutputDTO:
    """DTO de salida con los datos de un técnico."""

    id: int
    nombre: str
    especialidad: str

    @classmethod
    def from_entity(cls, entity: Tecnico) -> "TecnicoOutputDTO":
        return cls(
            id=entity.id,
            nombre=entity.nombre,
            especialidad=entity.especialidad,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "nombre": self.nombre,
            "especialidad": self.especialidad,
        }


@dataclass
class EstadisticasTecnicosDTO:
    """
    Resumen de técnicos por especialidad.

    Attributes:
        total: Número total de técnicos
        por_especialidad: Técnicos por especialidad, en orden de aparición
    """

    total: int
    por_especialidad: Dict[str, int] = field(default_factory=dict)

    @property
    def especialidades(self) -> List[str]:
        return list(self.por_especialidad)

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "total_especialidades": len(self.especialidades),
            "especialidades": self.especialidades,
            "por_especialidad": dict(self.por_especialidad),
        }
