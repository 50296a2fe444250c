"""
Use Cases (Application Services) del Dominio de Técnicos.

TecnicoService sigue las mismas reglas que ClienteService
(actualización parcial, eliminación idempotente) y además
normaliza la especialidad y ofrece estadísticas por especialidad.
"""

import logging
from typing import List, Optional

from src.core.shared.exceptions import EntityNotFoundError, ValidationError
from src.core.shared.validation import has_text

from .dtos import EstadisticasTecnicosDTO, TecnicoInputDTO
from .entities import Tecnico, normalizar_especialidad
from .ports import TecnicoRepository

logger = logging.getLogger(__name__)


class TecnicoService:
    """
    Lifecycle Service de Técnicos.

    Example:
        service = TecnicoService(InMemoryTecnicoRepository())
        tecnico = service.create(TecnicoInputDTO(nombre="Ana", especialidad="base de datos"))
        tecnico.especialidad  # "Base De Datos"
    """

    def __init__(self, tecnico_repo: TecnicoRepository):
        self.tecnico_repo = tecnico_repo

    def create(self, input_dto: TecnicoInputDTO) -> Tecnico:
        """
        Crea y persiste un técnico nuevo.

        Raises:
            ValidationError: Si el DTO es None o falta algún campo obligatorio
        """
        if input_dto is None:
            raise ValidationError("El DTO del técnico no puede ser nulo")

        tecnico = Tecnico.crear(
            nombre=input_dto.nombre,
            especialidad=input_dto.especialidad,
        )
        tecnico = self.tecnico_repo.save(tecnico)

        logger.info(f"Técnico creado exitosamente - ID: {tecnico.id}, Nombre: {tecnico.nombre}")
        return tecnico

    def update(self, tecnico_id: int, input_dto: TecnicoInputDTO) -> Tecnico:
        """
        Actualiza parcialmente un técnico.

        Raises:
            ValidationError: Si tecnico_id o el DTO son None
            EntityNotFoundError: Si el técnico no existe
        """
        if tecnico_id is None:
            raise ValidationError("El ID no puede ser nulo", field="id")
        if input_dto is None:
            raise ValidationError("El DTO del técnico no puede ser nulo")

        tecnico = self.tecnico_repo.find_by_id(tecnico_id)
        if tecnico is None:
            raise EntityNotFoundError(
                f"Técnico no encontrado con ID: {tecnico_id}",
                entity_type="Técnico",
                entity_id=tecnico_id,
            )

        if has_text(input_dto.nombre):
            tecnico.nombre = input_dto.nombre.strip()
        if has_text(input_dto.especialidad):
            tecnico.especialidad = normalizar_especialidad(input_dto.especialidad)

        tecnico = self.tecnico_repo.update(tecnico)

        logger.info(
            f"Técnico actualizado exitosamente - ID: {tecnico_id}, "
            f"Nuevo nombre: {tecnico.nombre}, Nueva especialidad: {tecnico.especialidad}"
        )
        return tecnico

    def delete(self, tecnico_id: int) -> None:
        """
        Elimina un técnico. Si no existe, solo se registra en el log.

        Raises:
            ValidationError: Si tecnico_id es None
        """
        if tecnico_id is None:
            raise ValidationError("El ID no puede ser nulo", field="id")

        if self.tecnico_repo.exists_by_id(tecnico_id):
            self.tecnico_repo.delete_by_id(tecnico_id)
            logger.info(f"Técnico con ID {tecnico_id} eliminado correctamente")
        else:
            logger.info(f"No se pudo eliminar: Técnico con ID {tecnico_id} no encontrado")

    def find_all(self) -> List[Tecnico]:
        tecnicos = self.tecnico_repo.find_all()
        logger.debug(f"Obteniendo todos los técnicos - Total: {len(tecnicos)}")
        return tecnicos

    def find_by_id(self, tecnico_id: int) -> Optional[Tecnico]:
        return self.tecnico_repo.find_by_id(tecnico_id)

    def obtener(self, tecnico_id: int) -> Tecnico:
        """
        Como find_by_id, pero un técnico inexistente es un error.

        Raises:
            EntityNotFoundError: Si el técnico no existe
        """
        tecnico = self.tecnico_repo.find_by_id(tecnico_id)
        if tecnico is None:
            raise EntityNotFoundError(
                f"Técnico no encontrado con ID: {tecnico_id}",
                entity_type="Técnico",
                entity_id=tecnico_id,
            )
        return tecnico

    def exists_by_id(self, tecnico_id: int) -> bool:
        return self.tecnico_repo.exists_by_id(tecnico_id)

    def count(self) -> int:
        return self.tecnico_repo.count()

    def find_by_nombre_containing(self, nombre: str) -> List[Tecnico]:
        return self.tecnico_repo.find_by_nombre_containing(nombre)

    def find_by_especialidad(self, especialidad: str) -> List[Tecnico]:
        logger.debug(f"Buscando técnicos con especialidad: {especialidad}")
        return self.tecnico_repo.find_by_especialidad(especialidad)

    def find_all_especialidades(self) -> List[str]:
        return self.tecnico_repo.find_all_especialidades()

    def estadisticas(self) -> EstadisticasTecnicosDTO:
        """
        Total de técnicos y cantidad por especialidad.

        Returns:
            DTO con el total y el conteo por especialidad, en el orden
            de find_all_especialidades()
        """
        tecnicos = self.tecnico_repo.find_all()
        por_especialidad = {}
        for tecnico in tecnicos:
            por_especialidad[tecnico.especialidad] = por_especialidad.get(tecnico.especialidad, 0) + 1

        return EstadisticasTecnicosDTO(
            total=len(tecnicos),
            por_especialidad=por_especialidad,
        )
