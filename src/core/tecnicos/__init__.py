"""
Dominio de Técnicos.

Quienes resuelven las solicitudes. La especialidad se normaliza
en formato título al crear y al actualizar.
"""

from .entities import Tecnico, normalizar_especialidad
from .dtos import TecnicoInputDTO, TecnicoOutputDTO, EstadisticasTecnicosDTO
from .ports import TecnicoRepository, InMemoryTecnicoRepository
from .use_cases import TecnicoService

__all__ = [
    "Tecnico",
    "normalizar_especialidad",
    "TecnicoInputDTO",
    "TecnicoOutputDTO",
    "EstadisticasTecnicosDTO",
    "TecnicoRepository",
    "InMemoryTecnicoRepository",
    "TecnicoService",
]
