#!/usr/bin/env python
"""
Setup rápido para desarrollo local.

Este script:
1. Configura Django settings
2. Inicializa el container (con o sin datos de ejemplo)
3. Muestra un resumen de los datos cargados
4. Levanta el servidor de desarrollo (opcional)

No hay base de datos: los datos viven en memoria mientras el proceso
esté activo.

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --without-sample-data
    python scripts/quick_setup.py --runserver
"""

import os
import sys
import argparse

# Agregar la raíz del proyecto al path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django(with_sample_data: bool):
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')
    os.environ['SOPORTE_SEED_SAMPLE_DATA'] = 'True' if with_sample_data else 'False'

    import django
    django.setup()


def show_info():
    """Muestra información del setup."""
    from django.conf import settings
    from src.config.container import get_container

    container = get_container()
    tecnico_service = container.tecnico_service()

    print("\n" + "=" * 60)
    print("📊 Información del Setup")
    print("=" * 60)
    print(f"  Debug Mode: {settings.DEBUG}")
    print(f"  Datos de ejemplo: {settings.SOPORTE_SEED_SAMPLE_DATA}")
    print(f"  Clientes: {container.cliente_service().count()}")
    print(f"  Técnicos: {tecnico_service.count()}")
    print(f"  Especialidades: {', '.join(tecnico_service.find_all_especialidades()) or '-'}")
    print(f"  Solicitudes: {container.solicitud_service().count()}")
    print("=" * 60)
    print("\n🚀 Endpoints:")
    print("   http://localhost:8000/api/clientes/")
    print("   http://localhost:8000/api/tecnicos/")
    print("   http://localhost:8000/api/solicitudes/")
    print("   http://localhost:8000/health/")
    print("\n")


def run_server(addrport: str):
    """Levanta el servidor de desarrollo en el mismo proceso."""
    from django.core.management import call_command

    # Sin autoreload: un proceso hijo perdería los datos en memoria
    call_command('runserver', addrport, use_reloader=False)


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desarrollo')
    parser.add_argument(
        '--without-sample-data',
        action='store_true',
        help='No cargar datos de ejemplo'
    )
    parser.add_argument(
        '--runserver',
        action='store_true',
        help='Levantar el servidor de desarrollo'
    )
    parser.add_argument(
        '--addrport',
        default='127.0.0.1:8000',
        help='Dirección y puerto del servidor (default: 127.0.0.1:8000)'
    )

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Soporte Técnico - Quick Setup")
    print("=" * 60 + "\n")

    setup_django(with_sample_data=not args.without_sample_data)

    show_info()

    if args.runserver:
        run_server(args.addrport)


if __name__ == '__main__':
    main()
