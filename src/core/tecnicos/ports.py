"""
Ports (Interfaces) del Dominio de Técnicos.
"""

from typing import List, Protocol, runtime_checkable

from src.core.shared.interfaces import Repository
from src.core.shared.repository import InMemoryRepository

from .entities import Tecnico


@runtime_checkable
class TecnicoRepository(Repository[Tecnico], Protocol):
    """
    Interfaz para persistencia de Técnicos.

    Además del CRUD genérico agrega búsquedas por nombre y
    especialidad, y el listado de especialidades distintas.
    """

    def find_by_nombre_containing(self, nombre: str) -> List[Tecnico]:
        ...

    def find_by_especialidad(self, especialidad: str) -> List[Tecnico]:
        """
        Técnicos con esa especialidad exacta (sin distinguir mayúsculas).

        Raises:
            ValidationError: Si especialidad es None o está en blanco
        """
        ...

    def find_all_especialidades(self) -> List[str]:
        """Especialidades distintas, en orden de primera aparición."""
        ...


class InMemoryTecnicoRepository(InMemoryRepository[Tecnico]):
    """
    Implementación en memoria del TecnicoRepository.

    Example:
        repo = InMemoryTecnicoRepository()
        repo.save(Tecnico.crear("Carlos López", "redes"))
        repo.find_by_especialidad("REDES")
    """

    entity_type = "Técnico"

    def find_by_nombre_containing(self, nombre: str) -> List[Tecnico]:
        return self.lookup().containing("nombre", nombre)

    def find_by_especialidad(self, especialidad: str) -> List[Tecnico]:
        return self.lookup().exact("especialidad", especialidad)

    def find_all_especialidades(self) -> List[str]:
        return self.lookup().distinct("especialidad")
