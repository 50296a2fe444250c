"""
URL Configuration para Soporte Técnico.

Estructura:
- /api/ - API JSON de clientes, técnicos y solicitudes
- /health/ - Health check
"""

from django.urls import path, include

from src.adapters.django_app.soporte.api_views import health

urlpatterns = [
    # API de Soporte
    path('api/', include('src.adapters.django_app.soporte.urls')),

    # Health check
    path('health/', health, name='health'),
]
