"""
Configuración del Django App para Soporte Técnico.

Inicializa el container de Dependency Injection al arrancar.
"""

from django.apps import AppConfig
from django.conf import settings


class SoporteConfig(AppConfig):
    """Configuración del app Soporte."""

    name = 'src.adapters.django_app.soporte'
    label = 'soporte'
    verbose_name = 'Soporte Técnico'

    def ready(self):
        """
        Ejecutado cuando el app está listo.

        Crea el container global y, si SOPORTE_SEED_SAMPLE_DATA está
        activo, carga los datos de ejemplo.
        """
        from src.config.container import bootstrap

        bootstrap(seed_sample_data=getattr(settings, 'SOPORTE_SEED_SAMPLE_DATA', False))
