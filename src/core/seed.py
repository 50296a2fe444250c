"""
Datos de ejemplo.

``seed()`` carga clientes, técnicos y solicitudes de muestra. Lo invoca
una sola vez la raíz de composición (``src.config.container.bootstrap``);
construir un repositorio nunca carga datos por sí mismo.

Los técnicos se guardan directamente en el repositorio, sin pasar por
TecnicoService, así que sus especialidades quedan tal cual
("Base de Datos").
"""

import logging
from datetime import datetime, timedelta

from src.core.clientes.entities import Cliente
from src.core.clientes.ports import ClienteRepository
from src.core.solicitudes.entities import EstadoSolicitud, Solicitud
from src.core.solicitudes.ports import SolicitudRepository
from src.core.tecnicos.entities import Tecnico
from src.core.tecnicos.ports import TecnicoRepository

logger = logging.getLogger(__name__)


CLIENTES_EJEMPLO = [
    ("Juan Pérez", "juan@empresa.com", "123456789"),
    ("María García", "maria@empresa.com", "987654321"),
]

TECNICOS_EJEMPLO = [
    ("Carlos López", "Redes"),
    ("Ana Martínez", "Software"),
    ("Pedro García", "Hardware"),
    ("Luisa Fernández", "Base de Datos"),
    ("Miguel Rodríguez", "Redes"),
    ("Elena Castro", "Seguridad"),
]


def seed(
    cliente_repo: ClienteRepository,
    tecnico_repo: TecnicoRepository,
    solicitud_repo: SolicitudRepository,
) -> None:
    """
    Carga los datos de ejemplo en los repositorios vacíos.

    Un repositorio que ya tiene datos no se toca. Las solicitudes
    de ejemplo solo se crean si clientes y técnicos vienen de esta
    misma carga.
    """
    clientes = []
    if cliente_repo.count() == 0:
        for nombre, email, telefono in CLIENTES_EJEMPLO:
            clientes.append(
                cliente_repo.save(Cliente(nombre=nombre, email=email, telefono=telefono))
            )
        logger.info(f"Datos de ejemplo de clientes inicializados - Total: {cliente_repo.count()}")

    tecnicos = []
    if tecnico_repo.count() == 0:
        for nombre, especialidad in TECNICOS_EJEMPLO:
            tecnicos.append(tecnico_repo.save(Tecnico(nombre=nombre, especialidad=especialidad)))
        logger.info(
            f"Datos de ejemplo de técnicos inicializados - Total: {tecnico_repo.count()} técnicos, "
            f"especialidades: {tecnico_repo.find_all_especialidades()}"
        )

    if solicitud_repo.count() == 0 and clientes and tecnicos:
        ahora = datetime.now()
        solicitud_repo.save(Solicitud(
            descripcion="No puedo conectarme a la red WiFi",
            fecha_creacion=ahora - timedelta(days=2),
            estado=EstadoSolicitud.IN_PROGRESS.value,
            cliente=clientes[0],
            tecnico=tecnicos[0],
        ))
        solicitud_repo.save(Solicitud(
            descripcion="Error al iniciar el sistema",
            fecha_creacion=ahora - timedelta(days=1),
            estado=EstadoSolicitud.PENDING.value,
            cliente=clientes[1],
            tecnico=tecnicos[1],
        ))
        logger.info(f"Datos de ejemplo de solicitudes inicializados - Total: {solicitud_repo.count()}")
