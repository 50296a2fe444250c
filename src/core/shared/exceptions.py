"""
Excepciones de Dominio de Soporte Técnico.

Este módulo define excepciones específicas del dominio que permiten
comunicar errores de forma clara y tipada entre las capas.

Jerarquía:
    DomainException (base)
    ├── ValidationError (argumento nulo o vacío)
    ├── EntityNotFoundError (la entidad no existe)
    └── DuplicateIdentifierError (ID ya utilizado)

Ninguna de estas fallas es transitoria: el core no reintenta nada.
La capa HTTP decide cómo exponerlas (400 / 404 / 409).
"""


class DomainException(Exception):
    """
    Excepción base para todos los errores de dominio.

    Permite capturar cualquier error de dominio de forma genérica
    en la frontera, sin confundirlo con errores inesperados.

    Example:
        try:
            cliente_service.update(cliente_id, dto)
        except DomainException as e:
            logger.error(f"Error de dominio: {e}")
    """

    def __init__(self, message: str, code: str = None):
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(self.message)

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def to_dict(self) -> dict:
        """Serializa la excepción a diccionario (útil para APIs)."""
        return {
            "error": self.code,
            "message": self.message,
        }


class ValidationError(DomainException):
    """
    Argumento obligatorio ausente o vacío.

    Error del llamador: se expone siempre a la frontera y nunca
    se reintenta.

    Example:
        if not nombre or not nombre.strip():
            raise ValidationError("El nombre es obligatorio", field="nombre")
    """

    def __init__(self, message: str, field: str = None):
        self.field = field
        code = f"VALIDATION_ERROR_{field.upper()}" if field else "VALIDATION_ERROR"
        super().__init__(message, code)

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.field:
            result["field"] = self.field
        return result


class EntityNotFoundError(DomainException):
    """
    Entidad no encontrada en el repositorio.

    Example:
        solicitud = repo.find_by_id(solicitud_id)
        if solicitud is None:
            raise EntityNotFoundError(
                f"Solicitud no encontrada con ID: {solicitud_id}",
                entity_type="Solicitud",
                entity_id=solicitud_id,
            )
    """

    def __init__(self, message: str, entity_type: str = None, entity_id=None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "ENTITY_NOT_FOUND")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id is not None:
            result["entity_id"] = self.entity_id
        return result


class DuplicateIdentifierError(DomainException):
    """
    Se intentó guardar una entidad con un ID que ya está en uso.
    """

    def __init__(self, message: str, entity_type: str = None, entity_id=None):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(message, "DUPLICATE_IDENTIFIER")

    def to_dict(self) -> dict:
        result = super().to_dict()
        if self.entity_type:
            result["entity_type"] = self.entity_type
        if self.entity_id is not None:
            result["entity_id"] = self.entity_id
        return result
