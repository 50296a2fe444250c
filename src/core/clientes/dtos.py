"""
Data Transfer Objects (DTOs) del Dominio de Clientes.

- ClienteInputDTO: datos de entrada (creación o actualización parcial)
- ClienteOutputDTO: datos de salida para la capa HTTP
"""

from dataclasses import dataclass
from typing import Optional

from .entities import Cliente


@dataclass(frozen=True)
class ClienteInputDTO:
    """
    DTO de entrada para crear o actualizar un cliente.

    En una actualización, los campos None o en blanco conservan
    el valor anterior.
    """

    nombre: Optional[str] = None
    email: Optional[str] = None
    telefono: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "nombre": self.nombre,
            "email": self.email,
            "telefono": self.telefono,
        }


@dataclass
class ClienteOutputDTO:
    """DTO de salida con los datos de un cliente."""

    id: int
    nombre: str
    email: str
    telefono: str

    @classmethod
    def from_entity(cls, entity: Cliente) -> "ClienteOutputDTO":
        return cls(
            id=entity.id,
            nombre=entity.nombre,
            email=entity.email,
            telefono=entity.telefono,
        )

    def to_dict(self) -> dict:
        """Convierte a diccionario (serialización JSON)."""
        return {
            "id": self.id,
            "nombre": self.nombre,
            "email": self.email,
            "telefono": self.telefono,
        }
