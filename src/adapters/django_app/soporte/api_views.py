"""
API Views JSON para Soporte Técnico.

Endpoints:
- GET/POST /api/clientes/ - Listar (filtros ?nombre=, ?email=) / crear
- GET/PUT/PATCH/DELETE /api/clientes/<id>/
- GET/POST /api/tecnicos/ - Listar (filtros ?nombre=, ?especialidad=) / crear
- GET /api/tecnicos/especialidades/ - Especialidades distintas
- GET /api/tecnicos/estadisticas/ - Técnicos por especialidad
- GET /api/tecnicos/especialidad/<especialidad>/ - Técnicos de una especialidad
- GET/PUT/PATCH/DELETE /api/tecnicos/<id>/
- GET/POST /api/solicitudes/
- GET/PUT/PATCH/DELETE /api/solicitudes/<id>/
- GET /health/

Formato:
- Entrada: JSON
- Salida: JSON con estructura {success, data/error, meta}
- DELETE exitoso: 204 sin cuerpo
"""

import json
import logging
from typing import Any, Dict

from django.views import View
from django.http import HttpRequest, HttpResponse, JsonResponse
from django.utils.decorators import method_decorator
from django.views.decorators.csrf import csrf_exempt

from src.core.clientes.dtos import ClienteOutputDTO
from src.core.solicitudes.dtos import SolicitudOutputDTO
from src.core.tecnicos.dtos import TecnicoOutputDTO
from src.core.shared.exceptions import (
    DomainException,
    DuplicateIdentifierError,
    EntityNotFoundError,
    ValidationError,
)
from src.config.container import get_container

from .forms import ClienteForm, SolicitudForm, TecnicoForm

logger = logging.getLogger(__name__)


# =============================================================================
# Helpers
# =============================================================================

def json_response(success: bool, data: Any = None, error: str = None,
                  status: int = 200, meta: Dict = None) -> JsonResponse:
    """
    Crea una respuesta JSON estandarizada.

    Args:
        success: Si la operación fue exitosa
        data: Datos de la respuesta
        error: Mensaje de error (si aplica)
        status: HTTP status code
        meta: Metadatos adicionales

    Returns:
        JsonResponse formateada
    """
    response = {'success': success}

    if data is not None:
        response['data'] = data

    if error is not None:
        response['error'] = error

    if meta is not None:
        response['meta'] = meta

    return JsonResponse(response, status=status)


def parse_json_body(request: HttpRequest) -> Dict:
    """
    Parsea el body JSON del request.

    Raises:
        ValueError: Si el JSON es inválido o no es un objeto
    """
    if not request.body:
        return {}

    try:
        data = json.loads(request.body)
    except json.JSONDecodeError as e:
        raise ValueError(f"JSON inválido: {e}")

    if not isinstance(data, dict):
        raise ValueError("El cuerpo debe ser un objeto JSON")
    return data


def form_errors(form) -> Dict:
    """Errores de un form como {campo: [mensajes]}."""
    return {
        field: [error['message'] for error in errors]
        for field, errors in form.errors.get_json_data().items()
    }


# =============================================================================
# Base API View
# =============================================================================

@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """
    View base para APIs JSON.

    Provee:
    - Parsing de JSON
    - Acceso al container DI
    - Validación con forms
    - Tratamiento de errores estandarizado
    """

    def get_container(self):
        """Retorna el container de DI."""
        return get_container()

    def get_service(self, service_name: str):
        """Obtiene un service del container."""
        container = self.get_container()
        return getattr(container, service_name)()

    def parse_body(self, request: HttpRequest) -> Dict:
        """Parsea el body JSON."""
        return parse_json_body(request)

    def invalid_form(self, form) -> JsonResponse:
        return json_response(
            success=False,
            error="Datos de entrada inválidos",
            status=400,
            meta={'errors': form_errors(form)}
        )

    def handle_exception(self, e: Exception) -> JsonResponse:
        """
        Trata excepciones y retorna la respuesta apropiada.

        Args:
            e: Excepción capturada

        Returns:
            JsonResponse con el error
        """
        if isinstance(e, ValidationError):
            return json_response(
                success=False,
                error=str(e),
                status=400,
                meta={'field': getattr(e, 'field', None)}
            )

        if isinstance(e, EntityNotFoundError):
            return json_response(
                success=False,
                error=str(e),
                status=404,
                meta={'entity_type': e.entity_type, 'entity_id': e.entity_id}
            )

        if isinstance(e, DuplicateIdentifierError):
            return json_response(
                success=False,
                error=str(e),
                status=409,
                meta={'entity_type': e.entity_type, 'entity_id': e.entity_id}
            )

        if isinstance(e, DomainException):
            return json_response(
                success=False,
                error=str(e),
                status=400
            )

        if isinstance(e, ValueError):
            return json_response(
                success=False,
                error=str(e),
                status=400
            )

        # Error inesperado
        logger.exception(f"Error inesperado en la API: {e}")
        return json_response(
            success=False,
            error="Error interno del servidor",
            status=500
        )


def lista(items, output_dto) -> JsonResponse:
    """Respuesta de listado con el total en meta."""
    return json_response(
        success=True,
        data=[output_dto.from_entity(item).to_dict() for item in items],
        meta={'total': len(items)}
    )


# =============================================================================
# Clientes
# =============================================================================

class ClienteAPIListView(BaseAPIView):
    """
    GET /api/clientes/ - Lista clientes
    POST /api/clientes/ - Crea cliente
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        """
        Lista clientes.

        Query params:
        - nombre: contiene el texto (sin distinguir mayúsculas)
        - email: coincidencia exacta
        """
        try:
            service = self.get_service('cliente_service')

            nombre = request.GET.get('nombre')
            email = request.GET.get('email')

            if nombre:
                clientes = service.find_by_nombre_containing(nombre)
            elif email:
                cliente = service.find_by_email(email)
                clientes = [cliente] if cliente else []
            else:
                clientes = service.find_all()

            return lista(clientes, ClienteOutputDTO)

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Crea un cliente.

        Body JSON:
        {
            "nombre": "string (2-100)",
            "email": "email válido",
            "telefono": "string"
        }
        """
        try:
            form = ClienteForm(self.parse_body(request))
            if not form.is_valid():
                return self.invalid_form(form)

            cliente = self.get_service('cliente_service').create(form.to_input_dto())

            logger.info(f"API: Cliente creado: {cliente.id}")

            return json_response(
                success=True,
                data=ClienteOutputDTO.from_entity(cliente).to_dict(),
                status=201
            )

        except Exception as e:
            return self.handle_exception(e)


class ClienteAPIDetailView(BaseAPIView):
    """
    GET /api/clientes/<id>/ - Obtiene cliente
    PUT /api/clientes/<id>/ - Actualiza (todos los campos obligatorios)
    PATCH /api/clientes/<id>/ - Actualiza solo los campos enviados
    DELETE /api/clientes/<id>/ - Elimina (idempotente)
    """

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            cliente = self.get_service('cliente_service').obtener(pk)
            return json_response(
                success=True,
                data=ClienteOutputDTO.from_entity(cliente).to_dict()
            )

        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        return self._update(request, pk, parcial=False)

    def patch(self, request: HttpRequest, pk: int) -> JsonResponse:
        return self._update(request, pk, parcial=True)

    def delete(self, request: HttpRequest, pk: int) -> HttpResponse:
        try:
            self.get_service('cliente_service').delete(pk)
            logger.info(f"API: Cliente {pk} eliminado")
            return HttpResponse(status=204)

        except Exception as e:
            return self.handle_exception(e)

    def _update(self, request: HttpRequest, pk: int, parcial: bool) -> JsonResponse:
        try:
            form = ClienteForm(self.parse_body(request), parcial=parcial)
            if not form.is_valid():
                return self.invalid_form(form)

            cliente = self.get_service('cliente_service').update(pk, form.to_input_dto())

            logger.info(f"API: Cliente {pk} actualizado")

            return json_response(
                success=True,
                data=ClienteOutputDTO.from_entity(cliente).to_dict()
            )

        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Técnicos
# =============================================================================

class TecnicoAPIListView(BaseAPIView):
    """
    GET /api/tecnicos/ - Lista técnicos
    POST /api/tecnicos/ - Crea técnico
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        """
        Lista técnicos.

        Query params:
        - nombre: contiene el texto (sin distinguir mayúsculas)
        - especialidad: coincidencia exacta (sin distinguir mayúsculas)
        """
        try:
            service = self.get_service('tecnico_service')

            nombre = request.GET.get('nombre')
            especialidad = request.GET.get('especialidad')

            if nombre:
                tecnicos = service.find_by_nombre_containing(nombre)
            elif especialidad:
                tecnicos = service.find_by_especialidad(especialidad)
            else:
                tecnicos = service.find_all()

            return lista(tecnicos, TecnicoOutputDTO)

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Crea un técnico.

        Body JSON:
        {
            "nombre": "string (2-100)",
            "especialidad": "string (2-50)"
        }
        """
        try:
            form = TecnicoForm(self.parse_body(request))
            if not form.is_valid():
                return self.invalid_form(form)

            tecnico = self.get_service('tecnico_service').create(form.to_input_dto())

            logger.info(f"API: Técnico creado: {tecnico.id}")

            return json_response(
                success=True,
                data=TecnicoOutputDTO.from_entity(tecnico).to_dict(),
                status=201
            )

        except Exception as e:
            return self.handle_exception(e)


class TecnicoAPIDetailView(BaseAPIView):
    """
    GET /api/tecnicos/<id>/ - Obtiene técnico
    PUT /api/tecnicos/<id>/ - Actualiza (todos los campos obligatorios)
    PATCH /api/tecnicos/<id>/ - Actualiza solo los campos enviados
    DELETE /api/tecnicos/<id>/ - Elimina (idempotente)
    """

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            tecnico = self.get_service('tecnico_service').obtener(pk)
            return json_response(
                success=True,
                data=TecnicoOutputDTO.from_entity(tecnico).to_dict()
            )

        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        return self._update(request, pk, parcial=False)

    def patch(self, request: HttpRequest, pk: int) -> JsonResponse:
        return self._update(request, pk, parcial=True)

    def delete(self, request: HttpRequest, pk: int) -> HttpResponse:
        try:
            self.get_service('tecnico_service').delete(pk)
            logger.info(f"API: Técnico {pk} eliminado")
            return HttpResponse(status=204)

        except Exception as e:
            return self.handle_exception(e)

    def _update(self, request: HttpRequest, pk: int, parcial: bool) -> JsonResponse:
        try:
            form = TecnicoForm(self.parse_body(request), parcial=parcial)
            if not form.is_valid():
                return self.invalid_form(form)

            tecnico = self.get_service('tecnico_service').update(pk, form.to_input_dto())

            logger.info(f"API: Técnico {pk} actualizado")

            return json_response(
                success=True,
                data=TecnicoOutputDTO.from_entity(tecnico).to_dict()
            )

        except Exception as e:
            return self.handle_exception(e)


class TecnicoAPIEspecialidadView(BaseAPIView):
    """GET /api/tecnicos/especialidad/<especialidad>/"""

    def get(self, request: HttpRequest, especialidad: str) -> JsonResponse:
        try:
            tecnicos = self.get_service('tecnico_service').find_by_especialidad(especialidad)
            return lista(tecnicos, TecnicoOutputDTO)

        except Exception as e:
            return self.handle_exception(e)


class TecnicoAPIEspecialidadesView(BaseAPIView):
    """GET /api/tecnicos/especialidades/"""

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            especialidades = self.get_service('tecnico_service').find_all_especialidades()
            return json_response(
                success=True,
                data=especialidades,
                meta={'total': len(especialidades)}
            )

        except Exception as e:
            return self.handle_exception(e)


class TecnicoAPIEstadisticasView(BaseAPIView):
    """GET /api/tecnicos/estadisticas/"""

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            estadisticas = self.get_service('tecnico_service').estadisticas()
            return json_response(
                success=True,
                data=estadisticas.to_dict()
            )

        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Solicitudes
# =============================================================================

class SolicitudAPIListView(BaseAPIView):
    """
    GET /api/solicitudes/ - Lista solicitudes
    POST /api/solicitudes/ - Crea solicitud
    """

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            solicitudes = self.get_service('solicitud_service').find_all()
            return lista(solicitudes, SolicitudOutputDTO)

        except Exception as e:
            return self.handle_exception(e)

    def post(self, request: HttpRequest) -> JsonResponse:
        """
        Crea una solicitud.

        Body JSON:
        {
            "descripcion": "string (obligatorio)",
            "cliente_id": int (obligatorio),
            "tecnico_id": int (opcional),
            "estado": "string (opcional, PENDING por defecto)",
            "titulo": "string (opcional)"
        }
        """
        try:
            form = SolicitudForm(self.parse_body(request))
            if not form.is_valid():
                return self.invalid_form(form)

            solicitud = self.get_service('solicitud_service').create_from_input(
                form.to_input_dto()
            )

            logger.info(f"API: Solicitud creada: {solicitud.id}")

            return json_response(
                success=True,
                data=SolicitudOutputDTO.from_entity(solicitud).to_dict(),
                status=201
            )

        except Exception as e:
            return self.handle_exception(e)


class SolicitudAPIDetailView(BaseAPIView):
    """
    GET /api/solicitudes/<id>/ - Obtiene solicitud
    PUT /api/solicitudes/<id>/ - Reemplazo completo
    PATCH /api/solicitudes/<id>/ - Reemplazo partiendo de los valores actuales
    DELETE /api/solicitudes/<id>/ - Elimina (404 si no existe)
    """

    def get(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            solicitud = self.get_service('solicitud_service').obtener(pk)
            return json_response(
                success=True,
                data=SolicitudOutputDTO.from_entity(solicitud).to_dict()
            )

        except Exception as e:
            return self.handle_exception(e)

    def put(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            form = SolicitudForm(self.parse_body(request))
            if not form.is_valid():
                return self.invalid_form(form)

            solicitud = self.get_service('solicitud_service').update_from_input(
                pk, form.to_input_dto()
            )

            logger.info(f"API: Solicitud {pk} reemplazada")

            return json_response(
                success=True,
                data=SolicitudOutputDTO.from_entity(solicitud).to_dict()
            )

        except Exception as e:
            return self.handle_exception(e)

    def patch(self, request: HttpRequest, pk: int) -> JsonResponse:
        try:
            form = SolicitudForm(self.parse_body(request), parcial=True)
            if not form.is_valid():
                return self.invalid_form(form)

            solicitud = self.get_service('solicitud_service').update_parcial(
                pk, form.to_input_dto()
            )

            logger.info(f"API: Solicitud {pk} actualizada")

            return json_response(
                success=True,
                data=SolicitudOutputDTO.from_entity(solicitud).to_dict()
            )

        except Exception as e:
            return self.handle_exception(e)

    def delete(self, request: HttpRequest, pk: int) -> HttpResponse:
        try:
            self.get_service('solicitud_service').delete(pk)
            logger.info(f"API: Solicitud {pk} eliminada")
            return HttpResponse(status=204)

        except Exception as e:
            return self.handle_exception(e)


# =============================================================================
# Health check
# =============================================================================

def health(request: HttpRequest) -> JsonResponse:
    """GET /health/"""
    return JsonResponse({'status': 'ok'})
