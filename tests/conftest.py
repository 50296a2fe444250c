"""
Configuración global de Pytest para Soporte Técnico.

Este archivo lo carga pytest automáticamente y provee fixtures
compartidas por los tests de core, adapters e integración.
"""

import pytest
from pathlib import Path

from src.core.clientes.entities import Cliente
from src.core.clientes.ports import InMemoryClienteRepository
from src.core.clientes.use_cases import ClienteService
from src.core.solicitudes.ports import InMemorySolicitudRepository
from src.core.solicitudes.use_cases import SolicitudService
from src.core.tecnicos.entities import Tecnico
from src.core.tecnicos.ports import InMemoryTecnicoRepository
from src.core.tecnicos.use_cases import TecnicoService


@pytest.fixture(scope="session")
def project_root():
    """Retorna la ruta raíz del proyecto."""
    return Path(__file__).parent.parent


@pytest.fixture(autouse=True)
def reset_singletons():
    """
    Reset de singletons entre tests.

    Garantiza que cada test empieza con un container vacío.
    """
    from src.config.container import reset_container

    reset_container()
    yield
    reset_container()


# =============================================================================
# Repositorios y services en memoria
# =============================================================================

@pytest.fixture
def cliente_repo():
    return InMemoryClienteRepository()


@pytest.fixture
def tecnico_repo():
    return InMemoryTecnicoRepository()


@pytest.fixture
def solicitud_repo():
    return InMemorySolicitudRepository()


@pytest.fixture
def cliente_service(cliente_repo):
    return ClienteService(cliente_repo)


@pytest.fixture
def tecnico_service(tecnico_repo):
    return TecnicoService(tecnico_repo)


@pytest.fixture
def solicitud_service(solicitud_repo, cliente_repo, tecnico_repo):
    return SolicitudService(solicitud_repo, cliente_repo, tecnico_repo)


@pytest.fixture
def cliente_guardado(cliente_repo):
    """Cliente ya persistido (ID 1)."""
    return cliente_repo.save(
        Cliente(nombre="Juan Pérez", email="juan@empresa.com", telefono="123456789")
    )


@pytest.fixture
def tecnico_guardado(tecnico_repo):
    """Técnico ya persistido (ID 1)."""
    return tecnico_repo.save(Tecnico(nombre="Carlos López", especialidad="Redes"))


def configure_django():
    """
    Configura Django para los tests de adapters e integración.

    Sin base de datos y sin datos de ejemplo: cada test arma su
    propio escenario.
    """
    import django
    from django.conf import settings

    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='test-secret-key',
            ALLOWED_HOSTS=['testserver', 'localhost'],
            DATABASES={},
            INSTALLED_APPS=[
                'src.adapters.django_app.soporte',
            ],
            ROOT_URLCONF='src.config.urls',
            MIDDLEWARE=[
                'django.middleware.common.CommonMiddleware',
            ],
            USE_TZ=False,
            TIME_ZONE='America/Bogota',
            SOPORTE_SEED_SAMPLE_DATA=False,
        )
        django.setup()


def pytest_configure(config):
    """Configuración de pytest."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    configure_django()
