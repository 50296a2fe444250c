"""
Configuración del proyecto Soporte Técnico.

Módulos:
- settings: Configuración Django
- urls: Rutas principales
- wsgi: WSGI application
- container: Dependency Injection Container (raíz de composición)
"""
