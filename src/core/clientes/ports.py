"""
Ports (Interfaces) del Dominio de Clientes.

Define el contrato del repositorio de clientes y su implementación
en memoria.
"""

from typing import List, Optional, Protocol, runtime_checkable

from src.core.shared.interfaces import Repository
from src.core.shared.repository import InMemoryRepository

from .entities import Cliente


@runtime_checkable
class ClienteRepository(Repository[Cliente], Protocol):
    """
    Interfaz para persistencia de Clientes.

    Además del CRUD genérico agrega búsquedas por nombre y email.
    """

    def find_by_nombre_containing(self, nombre: str) -> List[Cliente]:
        """
        Clientes cuyo nombre contiene el texto (sin distinguir mayúsculas).

        Raises:
            ValidationError: Si nombre es None o está en blanco
        """
        ...

    def find_by_email(self, email: str) -> Optional[Cliente]:
        """
        Cliente con ese email exacto (sin distinguir mayúsculas).

        Raises:
            ValidationError: Si email es None o está en blanco
        """
        ...


class InMemoryClienteRepository(InMemoryRepository[Cliente]):
    """
    Implementación en memoria del ClienteRepository.

    Example:
        repo = InMemoryClienteRepository()
        repo.save(Cliente.crear("Juan Pérez", "juan@empresa.com", "123456789"))
        repo.find_by_email("JUAN@empresa.com")
    """

    entity_type = "Cliente"

    def find_by_nombre_containing(self, nombre: str) -> List[Cliente]:
        return self.lookup().containing("nombre", nombre)

    def find_by_email(self, email: str) -> Optional[Cliente]:
        return self.lookup().first_exact("email", email)
