"""
Core Domain Layer - El Hexágono.

Este paquete contiene la lógica de negocio pura, sin dependencias de frameworks.
Características:
- Cero dependencias externas (Django, dependency-injector, etc.)
- 100% testeable sin servidor ni base de datos
- Almacenamiento en memoria, válido durante la vida del proceso
"""
