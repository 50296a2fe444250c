"""
URL patterns de la API de Soporte Técnico.

Montadas bajo /api/ por src.config.urls.
"""

from django.urls import path
from . import api_views

app_name = 'soporte'

urlpatterns = [
    # =========================================================================
    # Clientes
    # =========================================================================

    path('clientes/', api_views.ClienteAPIListView.as_view(), name='clientes'),
    path('clientes/<int:pk>/', api_views.ClienteAPIDetailView.as_view(), name='cliente_detail'),

    # =========================================================================
    # Técnicos
    # =========================================================================

    path('tecnicos/', api_views.TecnicoAPIListView.as_view(), name='tecnicos'),

    # Antes del <pk> para no conflictuar
    path('tecnicos/especialidades/', api_views.TecnicoAPIEspecialidadesView.as_view(), name='tecnicos_especialidades'),
    path('tecnicos/estadisticas/', api_views.TecnicoAPIEstadisticasView.as_view(), name='tecnicos_estadisticas'),
    path('tecnicos/especialidad/<str:especialidad>/', api_views.TecnicoAPIEspecialidadView.as_view(), name='tecnicos_por_especialidad'),

    path('tecnicos/<int:pk>/', api_views.TecnicoAPIDetailView.as_view(), name='tecnico_detail'),

    # =========================================================================
    # Solicitudes
    # =========================================================================

    path('solicitudes/', api_views.SolicitudAPIListView.as_view(), name='solicitudes'),
    path('solicitudes/<int:pk>/', api_views.SolicitudAPIDetailView.as_view(), name='solicitud_detail'),
]
