"""
Configuración pytest para los tests con Django.

Django ya está configurado por tests/conftest.py; aquí se agregan
fixtures de request y un container falso.
"""

import pytest
from unittest.mock import Mock, patch


@pytest.fixture
def rf():
    """Request Factory para crear requests."""
    from django.test import RequestFactory
    return RequestFactory()


@pytest.fixture
def client():
    """Django test client."""
    from django.test import Client
    return Client()


@pytest.fixture
def mock_container():
    """
    Container falso inyectado en las API views.

    Cada service es un Mock; se configuran en el test:
        mock_container.cliente_service.return_value.find_all.return_value = [...]
    """
    with patch('src.adapters.django_app.soporte.api_views.get_container') as get_container:
        container = Mock()
        get_container.return_value = container
        yield container
