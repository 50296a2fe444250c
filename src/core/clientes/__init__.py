"""
Dominio de Clientes.

Quien abre solicitudes de soporte. Actualización parcial y
eliminación idempotente.
"""

from .entities import Cliente
from .dtos import ClienteInputDTO, ClienteOutputDTO
from .ports import ClienteRepository, InMemoryClienteRepository
from .use_cases import ClienteService

__all__ = [
    "Cliente",
    "ClienteInputDTO",
    "ClienteOutputDTO",
    "ClienteRepository",
    "InMemoryClienteRepository",
    "ClienteService",
]
