"""
Use Cases (Application Services) del Dominio de Clientes.

ClienteService concentra el ciclo de vida de un cliente:
- create: valida, normaliza y guarda
- update: actualización PARCIAL (solo campos con valor)
- delete: idempotente (un ID inexistente se registra y se ignora)
- lecturas y búsquedas delegadas al repositorio
"""

import logging
from typing import List, Optional

from src.core.shared.exceptions import EntityNotFoundError, ValidationError
from src.core.shared.validation import has_text

from .dtos import ClienteInputDTO
from .entities import Cliente
from .ports import ClienteRepository

logger = logging.getLogger(__name__)


class ClienteService:
    """
    Lifecycle Service de Clientes.

    Attributes:
        cliente_repo: Repositorio de clientes

    Example:
        service = ClienteService(InMemoryClienteRepository())
        cliente = service.create(ClienteInputDTO(
            nombre="Juan Pérez",
            email="juan@empresa.com",
            telefono="123456789",
        ))
        cliente.id  # 1
    """

    def __init__(self, cliente_repo: ClienteRepository):
        self.cliente_repo = cliente_repo

    # =========================================================================
    # Escritura
    # =========================================================================

    def create(self, input_dto: ClienteInputDTO) -> Cliente:
        """
        Crea y persiste un cliente nuevo.

        Raises:
            ValidationError: Si el DTO es None o falta algún campo obligatorio
        """
        if input_dto is None:
            raise ValidationError("El DTO del cliente no puede ser nulo")

        cliente = Cliente.crear(
            nombre=input_dto.nombre,
            email=input_dto.email,
            telefono=input_dto.telefono,
        )
        cliente = self.cliente_repo.save(cliente)

        logger.info(f"Cliente creado exitosamente - ID: {cliente.id}, Nombre: {cliente.nombre}")
        return cliente

    def update(self, cliente_id: int, input_dto: ClienteInputDTO) -> Cliente:
        """
        Actualiza parcialmente un cliente.

        Solo los campos presentes y no vacíos del DTO sobrescriben
        los valores actuales; el resto se conserva.

        Raises:
            ValidationError: Si cliente_id o el DTO son None
            EntityNotFoundError: Si el cliente no existe
        """
        if cliente_id is None:
            raise ValidationError("El ID no puede ser nulo", field="id")
        if input_dto is None:
            raise ValidationError("El DTO del cliente no puede ser nulo")

        cliente = self.cliente_repo.find_by_id(cliente_id)
        if cliente is None:
            raise EntityNotFoundError(
                f"Cliente no encontrado con ID: {cliente_id}",
                entity_type="Cliente",
                entity_id=cliente_id,
            )

        if has_text(input_dto.nombre):
            cliente.nombre = input_dto.nombre.strip()
        if has_text(input_dto.email):
            cliente.email = input_dto.email.strip()
        if has_text(input_dto.telefono):
            cliente.telefono = input_dto.telefono.strip()

        cliente = self.cliente_repo.update(cliente)

        logger.info(f"Cliente actualizado exitosamente - ID: {cliente_id}, Nombre: {cliente.nombre}")
        return cliente

    def delete(self, cliente_id: int) -> None:
        """
        Elimina un cliente. Si no existe, solo se registra en el log.

        Raises:
            ValidationError: Si cliente_id es None
        """
        if cliente_id is None:
            raise ValidationError("El ID no puede ser nulo", field="id")

        if self.cliente_repo.exists_by_id(cliente_id):
            self.cliente_repo.delete_by_id(cliente_id)
            logger.info(f"Cliente con ID {cliente_id} eliminado correctamente")
        else:
            logger.info(f"No se pudo eliminar: Cliente con ID {cliente_id} no encontrado")

    # =========================================================================
    # Lectura
    # =========================================================================

    def find_all(self) -> List[Cliente]:
        return self.cliente_repo.find_all()

    def find_by_id(self, cliente_id: int) -> Optional[Cliente]:
        return self.cliente_repo.find_by_id(cliente_id)

    def obtener(self, cliente_id: int) -> Cliente:
        """
        Como find_by_id, pero un cliente inexistente es un error.

        Raises:
            EntityNotFoundError: Si el cliente no existe
        """
        cliente = self.cliente_repo.find_by_id(cliente_id)
        if cliente is None:
            raise EntityNotFoundError(
                f"Cliente no encontrado con ID: {cliente_id}",
                entity_type="Cliente",
                entity_id=cliente_id,
            )
        return cliente

    def exists_by_id(self, cliente_id: int) -> bool:
        return self.cliente_repo.exists_by_id(cliente_id)

    def count(self) -> int:
        return self.cliente_repo.count()

    def find_by_nombre_containing(self, nombre: str) -> List[Cliente]:
        return self.cliente_repo.find_by_nombre_containing(nombre)

    def find_by_email(self, email: str) -> Optional[Cliente]:
        return self.cliente_repo.find_by_email(email)
