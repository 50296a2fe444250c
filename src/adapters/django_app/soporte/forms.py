"""
Django Forms para validación de entrada.

Forms son DRIVING ADAPTERS que validan los datos antes de
pasarlos a los Services.

Responsabilidades:
- Validación estructural (obligatorios, longitudes, formato de email)
- Sanitización de entrada (strip)
- Mensajes de error legibles

Con ``parcial=True`` ningún campo es obligatorio: es la validación
de un PATCH, donde lo que no se envía conserva su valor.
"""

from django import forms

from src.core.clientes.dtos import ClienteInputDTO
from src.core.solicitudes.dtos import SolicitudInputDTO
from src.core.tecnicos.dtos import TecnicoInputDTO


class ParcialFormMixin:
    """Vuelve opcionales todos los campos cuando ``parcial=True``."""

    def __init__(self, *args, parcial: bool = False, **kwargs):
        super().__init__(*args, **kwargs)
        self.parcial = parcial
        if parcial:
            for field in self.fields.values():
                field.required = False


class ClienteForm(ParcialFormMixin, forms.Form):
    """
    Form de cliente.

    Valida los datos antes de pasarlos a ClienteService.
    """

    nombre = forms.CharField(
        min_length=2,
        max_length=100,
        error_messages={
            'required': 'El nombre es obligatorio',
            'min_length': 'El nombre debe tener entre 2 y 100 caracteres',
            'max_length': 'El nombre debe tener entre 2 y 100 caracteres',
        },
    )

    email = forms.EmailField(
        error_messages={
            'required': 'El email es obligatorio',
            'invalid': 'El email debe ser válido',
        },
    )

    telefono = forms.CharField(
        max_length=30,
        error_messages={
            'required': 'El teléfono es obligatorio',
        },
    )

    def to_input_dto(self) -> ClienteInputDTO:
        data = self.cleaned_data
        return ClienteInputDTO(
            nombre=data.get('nombre') or None,
            email=data.get('email') or None,
            telefono=data.get('telefono') or None,
        )


class TecnicoForm(ParcialFormMixin, forms.Form):
    """Form de técnico."""

    nombre = forms.CharField(
        min_length=2,
        max_length=100,
        error_messages={
            'required': 'El nombre es obligatorio',
            'min_length': 'El nombre debe tener entre 2 y 100 caracteres',
            'max_length': 'El nombre debe tener entre 2 y 100 caracteres',
        },
    )

    especialidad = forms.CharField(
        min_length=2,
        max_length=50,
        error_messages={
            'required': 'La especialidad es obligatoria',
            'min_length': 'La especialidad debe tener entre 2 y 50 caracteres',
            'max_length': 'La especialidad debe tener entre 2 y 50 caracteres',
        },
    )

    def to_input_dto(self) -> TecnicoInputDTO:
        data = self.cleaned_data
        return TecnicoInputDTO(
            nombre=data.get('nombre') or None,
            especialidad=data.get('especialidad') or None,
        )


class SolicitudForm(ParcialFormMixin, forms.Form):
    """
    Form de solicitud.

    ``estado`` es texto libre; vacío equivale a PENDING.
    """

    titulo = forms.CharField(
        required=False,
        max_length=200,
    )

    descripcion = forms.CharField(
        max_length=5000,
        error_messages={
            'required': 'La descripción es obligatoria',
        },
    )

    cliente_id = forms.IntegerField(
        min_value=1,
        error_messages={
            'required': 'El cliente es obligatorio',
            'invalid': 'El ID del cliente debe ser un número entero',
        },
    )

    tecnico_id = forms.IntegerField(
        required=False,
        min_value=1,
        error_messages={
            'invalid': 'El ID del técnico debe ser un número entero',
        },
    )

    estado = forms.CharField(
        required=False,
        max_length=50,
    )

    def to_input_dto(self) -> SolicitudInputDTO:
        data = self.cleaned_data
        return SolicitudInputDTO(
            titulo=data.get('titulo') or None,
            descripcion=data.get('descripcion') or None,
            cliente_id=data.get('cliente_id'),
            tecnico_id=data.get('tecnico_id'),
            estado=data.get('estado') or None,
        )
