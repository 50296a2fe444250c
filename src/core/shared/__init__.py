"""
Shared Domain Components.

Componentes compartidos entre todos los dominios:
- Excepciones de dominio
- Interfaces (Ports)
- Generador de IDs, repositorio base en memoria y Lookup Index
"""

from .exceptions import (
    DomainException,
    ValidationError,
    EntityNotFoundError,
    DuplicateIdentifierError,
)
from .identity import IdentifierGenerator
from .interfaces import Repository
from .lookup import LookupIndex
from .repository import InMemoryRepository

__all__ = [
    "DomainException",
    "ValidationError",
    "EntityNotFoundError",
    "DuplicateIdentifierError",
    "IdentifierGenerator",
    "Repository",
    "LookupIndex",
    "InMemoryRepository",
]
