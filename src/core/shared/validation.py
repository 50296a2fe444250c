"""Validaciones mínimas de texto compartidas por entidades y servicios."""

from typing import Optional

from .exceptions import ValidationError


def has_text(value: Optional[str]) -> bool:
    """True si ``value`` no es None ni está en blanco."""
    return value is not None and bool(value.strip())


def require_text(value: Optional[str], field: str, message: str = None) -> str:
    """
    Devuelve ``value`` sin espacios en los extremos.

    Raises:
        ValidationError: Si ``value`` es None o está en blanco
    """
    if not has_text(value):
        raise ValidationError(
            message or f"El campo {field} no puede estar vacío",
            field=field,
        )
    return value.strip()
