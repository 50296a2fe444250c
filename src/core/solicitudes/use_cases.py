"""
Use Cases (Application Services) del Dominio de Solicitudes.

SolicitudService orquesta Cliente y Técnico dentro de una Solicitud.

Diferencias con ClienteService/TecnicoService:
- update es un REEMPLAZO COMPLETO: todos los campos mutables se
  sobrescriben con la entrada (un estado vacío vuelve a PENDING)
- delete de un ID inexistente FALLA con EntityNotFoundError

Flujo de create:
1. Validar descripción y cliente
2. Completar fecha de creación y estado por defecto
3. Copiar cliente y técnico (instantáneas)
4. Persistir (asigna ID si falta)
"""

import copy
import logging
from typing import List, Optional

from src.core.clientes.entities import Cliente
from src.core.clientes.ports import ClienteRepository
from src.core.tecnicos.entities import Tecnico
from src.core.tecnicos.ports import TecnicoRepository
from src.core.shared.exceptions import EntityNotFoundError, ValidationError
from src.core.shared.validation import has_text

from .dtos import SolicitudInputDTO
from .entities import EstadoSolicitud, Solicitud
from .ports import SolicitudRepository

logger = logging.getLogger(__name__)


class SolicitudService:
    """
    Request Orchestrator.

    Attributes:
        solicitud_repo: Repositorio de solicitudes
        cliente_repo: Repositorio de clientes (para resolver cliente_id)
        tecnico_repo: Repositorio de técnicos (para resolver tecnico_id)

    Example:
        service = SolicitudService(solicitud_repo, cliente_repo, tecnico_repo)
        solicitud = service.create_from_input(
            SolicitudInputDTO(descripcion="No WiFi", cliente_id=1)
        )
        solicitud.estado  # "PENDING"
    """

    def __init__(
        self,
        solicitud_repo: SolicitudRepository,
        cliente_repo: ClienteRepository,
        tecnico_repo: TecnicoRepository,
    ):
        self.solicitud_repo = solicitud_repo
        self.cliente_repo = cliente_repo
        self.tecnico_repo = tecnico_repo

    # =========================================================================
    # Escritura
    # =========================================================================

    def create(self, solicitud: Solicitud) -> Solicitud:
        """
        Crea y persiste una solicitud.

        Args:
            solicitud: Solicitud nueva (id y fecha_creacion opcionales)

        Returns:
            Copia de la solicitud con id, fecha_creacion y estado
            completados; el objeto recibido no se modifica

        Raises:
            ValidationError: Si es None, sin descripción o sin cliente
            DuplicateIdentifierError: Si trae un ID ya utilizado
        """
        if solicitud is None:
            raise ValidationError("La solicitud no puede ser nula")

        solicitud = copy.deepcopy(solicitud)
        solicitud.validar_para_creacion()
        solicitud.completar_valores_por_defecto()
        solicitud.tomar_instantaneas()

        solicitud = self.solicitud_repo.save(solicitud)

        logger.info(
            f"Solicitud creada - ID: {solicitud.id}, Estado: {solicitud.estado}, "
            f"Cliente: {solicitud.cliente.id}, Asignada: {solicitud.esta_asignada}"
        )
        self._registrar_estado_no_estandar(solicitud)
        return solicitud

    def create_from_input(self, input_dto: SolicitudInputDTO) -> Solicitud:
        """
        Crea una solicitud resolviendo cliente_id y tecnico_id.

        Raises:
            ValidationError: Si el DTO es None o falta cliente_id
            EntityNotFoundError: Si el cliente o el técnico no existen
        """
        if input_dto is None:
            raise ValidationError("El DTO de la solicitud no puede ser nulo")

        return self.create(self._solicitud_desde(input_dto))

    def update(self, solicitud_id: int, solicitud: Solicitud) -> Solicitud:
        """
        Reemplaza todos los campos mutables de la solicitud.

        id y fecha_creacion se conservan.

        Raises:
            ValidationError: Si solicitud_id o solicitud son None, o falta el cliente
            EntityNotFoundError: Si la solicitud no existe
        """
        if solicitud is None:
            raise ValidationError("La solicitud no puede ser nula")

        solicitud.validar_para_reemplazo()
        existente = self.obtener(solicitud_id)
        existente.reemplazar_con(solicitud)
        existente = self.solicitud_repo.update(existente)

        logger.info(
            f"Solicitud actualizada - ID: {solicitud_id}, Estado: {existente.estado}, "
            f"Asignada: {existente.esta_asignada}"
        )
        self._registrar_estado_no_estandar(existente)
        return existente

    def update_from_input(self, solicitud_id: int, input_dto: SolicitudInputDTO) -> Solicitud:
        """
        Reemplazo completo resolviendo cliente_id y tecnico_id.

        Raises:
            ValidationError: Si solicitud_id o el DTO son None, o falta cliente_id
            EntityNotFoundError: Si la solicitud, el cliente o el técnico no existen
        """
        if input_dto is None:
            raise ValidationError("El DTO de la solicitud no puede ser nulo")

        self.obtener(solicitud_id)
        return self.update(solicitud_id, self._solicitud_desde(input_dto))

    def update_parcial(self, solicitud_id: int, input_dto: SolicitudInputDTO) -> Solicitud:
        """
        Reemplazo completo partiendo de los valores actuales.

        Los campos None o en blanco del DTO conservan el valor actual;
        cliente y técnico solo se vuelven a copiar si se indica su ID.

        Raises:
            ValidationError: Si solicitud_id o el DTO son None
            EntityNotFoundError: Si la solicitud, el cliente o el técnico no existen
        """
        if input_dto is None:
            raise ValidationError("El DTO de la solicitud no puede ser nulo")

        actual = self.obtener(solicitud_id)
        if has_text(input_dto.titulo):
            actual.titulo = input_dto.titulo.strip()
        if has_text(input_dto.descripcion):
            actual.descripcion = input_dto.descripcion.strip()
        if has_text(input_dto.estado):
            actual.estado = input_dto.estado
        if input_dto.cliente_id is not None:
            actual.cliente = self._resolver_cliente(input_dto.cliente_id)
        if input_dto.tecnico_id is not None:
            actual.tecnico = self._resolver_tecnico(input_dto.tecnico_id)

        return self.update(solicitud_id, actual)

    def delete(self, solicitud_id: int) -> None:
        """
        Elimina una solicitud existente.

        Raises:
            ValidationError: Si solicitud_id es None
            EntityNotFoundError: Si la solicitud no existe
        """
        if solicitud_id is None:
            raise ValidationError("El ID no puede ser nulo", field="id")

        if not self.solicitud_repo.exists_by_id(solicitud_id):
            raise EntityNotFoundError(
                f"Solicitud no encontrada con ID: {solicitud_id}",
                entity_type="Solicitud",
                entity_id=solicitud_id,
            )

        self.solicitud_repo.delete_by_id(solicitud_id)
        logger.info(f"Solicitud con ID {solicitud_id} eliminada correctamente")

    # =========================================================================
    # Lectura
    # =========================================================================

    def find_all(self) -> List[Solicitud]:
        return self.solicitud_repo.find_all()

    def find_by_id(self, solicitud_id: int) -> Optional[Solicitud]:
        return self.solicitud_repo.find_by_id(solicitud_id)

    def obtener(self, solicitud_id: int) -> Solicitud:
        """
        Como find_by_id, pero una solicitud inexistente es un error.

        Raises:
            ValidationError: Si solicitud_id es None
            EntityNotFoundError: Si la solicitud no existe
        """
        solicitud = self.solicitud_repo.find_by_id(solicitud_id)
        if solicitud is None:
            raise EntityNotFoundError(
                f"Solicitud no encontrada con ID: {solicitud_id}",
                entity_type="Solicitud",
                entity_id=solicitud_id,
            )
        return solicitud

    def exists_by_id(self, solicitud_id: int) -> bool:
        return self.solicitud_repo.exists_by_id(solicitud_id)

    def count(self) -> int:
        return self.solicitud_repo.count()

    # =========================================================================
    # Auxiliares
    # =========================================================================

    def _registrar_estado_no_estandar(self, solicitud: Solicitud) -> None:
        if not EstadoSolicitud.es_conocido(solicitud.estado):
            logger.warning(
                f"Solicitud {solicitud.id} con estado no estándar: {solicitud.estado}"
            )

    def _solicitud_desde(self, input_dto: SolicitudInputDTO) -> Solicitud:
        """Construye la Solicitud resolviendo las referencias del DTO."""
        return Solicitud(
            titulo=input_dto.titulo,
            descripcion=input_dto.descripcion,
            estado=input_dto.estado,
            cliente=self._resolver_cliente(input_dto.cliente_id),
            tecnico=self._resolver_tecnico(input_dto.tecnico_id),
        )

    def _resolver_cliente(self, cliente_id: Optional[int]) -> Cliente:
        if cliente_id is None:
            raise ValidationError("El ID del cliente es obligatorio", field="cliente_id")

        cliente = self.cliente_repo.find_by_id(cliente_id)
        if cliente is None:
            raise EntityNotFoundError(
                f"Cliente no encontrado con ID: {cliente_id}",
                entity_type="Cliente",
                entity_id=cliente_id,
            )
        return cliente

    def _resolver_tecnico(self, tecnico_id: Optional[int]) -> Optional[Tecnico]:
        if tecnico_id is None:
            return None

        tecnico = self.tecnico_repo.find_by_id(tecnico_id)
        if tecnico is None:
            raise EntityNotFoundError(
                f"Técnico no encontrado con ID: {tecnico_id}",
                entity_type="Técnico",
                entity_id=tecnico_id,
            )
        return tecnico
