"""
Entidades del Dominio de Solicitudes.

Una Solicitud es el pedido de soporte de un Cliente, opcionalmente
asignado a un Técnico.

Reglas de negocio encapsuladas:
- El estado es texto libre; si falta o está en blanco vale PENDING
- La fecha de creación se fija una única vez, al crear
- Cliente y Técnico se guardan como copias (instantáneas), no como
  referencias: editar el Cliente después no altera la Solicitud
"""

import copy
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from src.core.clientes.entities import Cliente
from src.core.tecnicos.entities import Tecnico
from src.core.shared.validation import has_text, require_text
from src.core.shared.exceptions import ValidationError


class EstadoSolicitud(Enum):
    """
    Estados conocidos de una solicitud.

    Flujo habitual:
        PENDING → IN_PROGRESS → RESOLVED → CLOSED

    El campo ``Solicitud.estado`` acepta cualquier texto; estos valores
    son solo los que usa el sistema.
    """

    PENDING = "PENDING"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"

    @classmethod
    def es_conocido(cls, value: Optional[str]) -> bool:
        """True si ``value`` coincide con alguno de los estados conocidos."""
        if not has_text(value):
            return False
        return value.strip().upper() in cls.__members__


ESTADO_POR_DEFECTO = EstadoSolicitud.PENDING.value


def estado_o_defecto(estado: Optional[str]) -> str:
    """Devuelve el estado sin espacios, o PENDING si falta o está en blanco."""
    return estado.strip() if has_text(estado) else ESTADO_POR_DEFECTO


@dataclass
class Solicitud:
    """
    Entidad de Dominio: Solicitud de soporte.

    Invariantes:
    - id y fecha_creacion no cambian una vez asignados
    - estado nunca queda vacío después de guardarse
    - cliente y tecnico son copias propias de la solicitud

    Attributes:
        id: Identificador entero (None hasta guardarse)
        descripcion: Descripción del problema
        cliente: Instantánea del cliente que abrió la solicitud
        tecnico: Instantánea del técnico asignado (opcional)
        estado: Estado actual (texto libre, ver EstadoSolicitud)
        fecha_creacion: Momento de creación
        titulo: Título corto opcional

    Example:
        solicitud = Solicitud(descripcion="No WiFi", cliente=cliente)
        solicitud.completar_valores_por_defecto()
        solicitud.estado  # "PENDING"
    """

    id: Optional[int] = None
    descripcion: str = ""
    cliente: Optional[Cliente] = None
    tecnico: Optional[Tecnico] = None
    estado: Optional[str] = None
    fecha_creacion: Optional[datetime] = None
    titulo: Optional[str] = None

    def validar_para_creacion(self) -> None:
        """
        Raises:
            ValidationError: Si falta la descripción o el cliente
        """
        self.descripcion = require_text(
            self.descripcion, "descripcion", "La descripción es obligatoria"
        )
        self.validar_para_reemplazo()

    def validar_para_reemplazo(self) -> None:
        """
        Raises:
            ValidationError: Si falta el cliente
        """
        if self.cliente is None:
            raise ValidationError("El cliente es obligatorio", field="cliente")

    def completar_valores_por_defecto(self) -> None:
        """Fija fecha de creación y estado si no vienen informados."""
        if self.fecha_creacion is None:
            self.fecha_creacion = datetime.now()
        self.estado = estado_o_defecto(self.estado)

    def tomar_instantaneas(self) -> None:
        """Reemplaza cliente y técnico por copias independientes."""
        self.cliente = copy.deepcopy(self.cliente)
        self.tecnico = copy.deepcopy(self.tecnico)

    def reemplazar_con(self, otra: "Solicitud") -> None:
        """
        Sobrescribe todos los campos mutables con los de ``otra``.

        Se conservan id y fecha_creacion. Un estado ausente o en blanco
        vuelve a PENDING.
        """
        self.titulo = otra.titulo
        self.descripcion = otra.descripcion
        self.estado = estado_o_defecto(otra.estado)
        self.cliente = copy.deepcopy(otra.cliente)
        self.tecnico = copy.deepcopy(otra.tecnico)

    @property
    def esta_asignada(self) -> bool:
        """Verifica si la solicitud tiene técnico asignado."""
        return self.tecnico is not None

    def __repr__(self) -> str:
        return (
            f"Solicitud(id={self.id}, "
            f"descripcion='{(self.descripcion or '')[:20]}', "
            f"estado={self.estado})"
        )
