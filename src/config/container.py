"""
Dependency Injection Container.

Configura y gestiona todas las dependencias de la aplicación.
Usa dependency-injector para lazy-loading e inyección explícita.

Patrones:
- Singleton: una instancia para toda la app (generadores de ID, repositorios)
- Factory: nueva instancia por llamada (services)

Es también la raíz de composición: ``bootstrap()`` crea el container
global y, si se pide, carga los datos de ejemplo una única vez.
"""

import logging
from typing import Optional

from dependency_injector import containers, providers

from src.core.clientes.ports import InMemoryClienteRepository
from src.core.clientes.use_cases import ClienteService
from src.core.seed import seed
from src.core.shared.identity import IdentifierGenerator
from src.core.solicitudes.ports import InMemorySolicitudRepository
from src.core.solicitudes.use_cases import SolicitudService
from src.core.tecnicos.ports import InMemoryTecnicoRepository
from src.core.tecnicos.use_cases import TecnicoService

logger = logging.getLogger(__name__)


class Container(containers.DeclarativeContainer):
    """
    Container principal de Dependency Injection.

    Organización:
    - Configuration: valores de settings
    - Identificadores: un generador por tipo de entidad
    - Repositories: almacenamiento en memoria
    - Services: Lifecycle Services y Request Orchestrator

    Example:
        container = Container()
        service = container.cliente_service()
        cliente = service.create(input_dto)
    """

    # =========================================================================
    # Configuration
    # =========================================================================

    config = providers.Configuration()

    # =========================================================================
    # Identificadores (Singleton - uno por repositorio)
    # =========================================================================

    cliente_id_generator = providers.Singleton(IdentifierGenerator)
    tecnico_id_generator = providers.Singleton(IdentifierGenerator)
    solicitud_id_generator = providers.Singleton(IdentifierGenerator)

    # =========================================================================
    # Repositories (Singleton - una instancia por app)
    # =========================================================================

    cliente_repository = providers.Singleton(
        InMemoryClienteRepository,
        id_generator=cliente_id_generator,
    )

    tecnico_repository = providers.Singleton(
        InMemoryTecnicoRepository,
        id_generator=tecnico_id_generator,
    )

    solicitud_repository = providers.Singleton(
        InMemorySolicitudRepository,
        id_generator=solicitud_id_generator,
    )

    # =========================================================================
    # Services (Factory - nueva instancia por llamada)
    # =========================================================================

    cliente_service = providers.Factory(
        ClienteService,
        cliente_repo=cliente_repository,
    )

    tecnico_service = providers.Factory(
        TecnicoService,
        tecnico_repo=tecnico_repository,
    )

    solicitud_service = providers.Factory(
        SolicitudService,
        solicitud_repo=solicitud_repository,
        cliente_repo=cliente_repository,
        tecnico_repo=tecnico_repository,
    )


# =============================================================================
# Container Global (Singleton)
# =============================================================================

_container: Optional[Container] = None


def get_container() -> Container:
    """
    Retorna la instancia global del container.

    La crea si no existe (lazy initialization), sin datos de ejemplo.
    """
    global _container

    if _container is None:
        _container = Container()

    return _container


def reset_container() -> None:
    """
    Reset del container (para tests).

    Descarta repositorios y generadores: el próximo get_container()
    empieza vacío.
    """
    global _container
    _container = None


def seed_container(container: Container) -> None:
    """Carga los datos de ejemplo en los repositorios del container."""
    seed(
        cliente_repo=container.cliente_repository(),
        tecnico_repo=container.tecnico_repository(),
        solicitud_repo=container.solicitud_repository(),
    )


def bootstrap(seed_sample_data: bool = False) -> Container:
    """
    Inicializa el container global.

    Args:
        seed_sample_data: Si True, carga los datos de ejemplo

    Returns:
        Container global configurado
    """
    container = get_container()
    container.config.from_dict({"seed_sample_data": seed_sample_data})

    if container.config.seed_sample_data():
        seed_container(container)
        logger.info("Container inicializado con datos de ejemplo")
    else:
        logger.info("Container inicializado sin datos de ejemplo")

    return container
