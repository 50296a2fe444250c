"""
Entidad del Dominio de Clientes.

Un Cliente es quien abre solicitudes de soporte. Su ID lo asigna
el repositorio al guardarlo y no cambia después.
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared.validation import require_text


@dataclass
class Cliente:
    """
    Entidad de Dominio: Cliente.

    Invariantes:
    - nombre, email y telefono nunca quedan en blanco
    - Los textos se guardan sin espacios en los extremos
    - El ID es inmutable una vez asignado

    Attributes:
        id: Identificador entero (None hasta guardarse)
        nombre: Nombre completo
        email: Correo de contacto
        telefono: Teléfono de contacto

    Example:
        cliente = Cliente.crear(
            nombre="Juan Pérez",
            email="juan@empresa.com",
            telefono="123456789",
        )
    """

    id: Optional[int] = None
    nombre: str = ""
    email: str = ""
    telefono: str = ""

    @classmethod
    def crear(cls, nombre: str, email: str, telefono: str) -> "Cliente":
        """
        Factory method que valida y normaliza los datos.

        Raises:
            ValidationError: Si algún campo obligatorio falta o está en blanco
        """
        return cls(
            nombre=require_text(nombre, "nombre", "El nombre del cliente es obligatorio"),
            email=require_text(email, "email", "El email del cliente es obligatorio"),
            telefono=require_text(telefono, "telefono", "El teléfono del cliente es obligatorio"),
        )

    def __repr__(self) -> str:
        return f"Cliente(id={self.id}, nombre='{self.nombre}', email='{self.email}')"
