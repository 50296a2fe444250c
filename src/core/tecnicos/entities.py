"""
Entidad del Dominio de Técnicos.

Regla de negocio encapsulada:
- La especialidad se guarda en formato título: cada palabra con la
  primera letra en mayúscula y el resto en minúscula
  ("base de datos" -> "Base De Datos").
"""

from dataclasses import dataclass
from typing import Optional

from src.core.shared.validation import require_text


def normalizar_especialidad(especialidad: str) -> str:
    """
    Capitaliza cada palabra separada por espacios.

    Los espacios repetidos se colapsan en uno solo.

    Example:
        normalizar_especialidad("  REDES  ")       # "Redes"
        normalizar_especialidad("base de datos")   # "Base De Datos"
    """
    if especialidad is None or not especialidad.strip():
        return especialidad
    return " ".join(palabra.capitalize() for palabra in especialidad.split())


@dataclass
class Tecnico:
    """
    Entidad de Dominio: Técnico.

    Attributes:
        id: Identificador entero (None hasta guardarse)
        nombre: Nombre completo
        especialidad: Área de trabajo, normalizada en formato título
    """

    id: Optional[int] = None
    nombre: str = ""
    especialidad: str = ""

    @classmethod
    def crear(cls, nombre: str, especialidad: str) -> "Tecnico":
        """
        Factory method que valida y normaliza los datos.

        Raises:
            ValidationError: Si nombre o especialidad faltan o están en blanco
        """
        nombre = require_text(nombre, "nombre", "El nombre del técnico es obligatorio")
        especialidad = require_text(
            especialidad, "especialidad", "La especialidad del técnico es obligatoria"
        )
        return cls(nombre=nombre, especialidad=normalizar_especialidad(especialidad))

    def __repr__(self) -> str:
        return (
            f"Tecnico(id={self.id}, nombre='{self.nombre}', "
            f"especialidad='{self.especialidad}')"
        )
