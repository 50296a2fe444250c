"""
Tests Unitarios del Dominio de Clientes.

Estrategia:
- InMemoryClienteRepository real (sin mocks) para el service
- Escenarios de éxito y error

Coverage:
- Cliente.crear
- InMemoryClienteRepository (búsquedas)
- ClienteService
"""

import pytest

from src.core.clientes.dtos import ClienteInputDTO, ClienteOutputDTO
from src.core.clientes.entities import Cliente
from src.core.clientes.ports import ClienteRepository
from src.core.shared.exceptions import EntityNotFoundError, ValidationError


def dto(nombre="Juan Pérez", email="juan@empresa.com", telefono="123456789"):
    return ClienteInputDTO(nombre=nombre, email=email, telefono=telefono)


# =============================================================================
# Entidad
# =============================================================================

class TestClienteCrear:
    """Tests del factory method Cliente.crear."""

    def test_crea_sin_id(self):
        cliente = Cliente.crear("Juan Pérez", "juan@empresa.com", "123456789")

        assert cliente.id is None
        assert cliente.nombre == "Juan Pérez"

    def test_quita_espacios(self):
        cliente = Cliente.crear("  Juan  ", " juan@empresa.com ", " 123 ")

        assert cliente.nombre == "Juan"
        assert cliente.email == "juan@empresa.com"
        assert cliente.telefono == "123"

    @pytest.mark.parametrize("campo", ["nombre", "email", "telefono"])
    def test_campo_en_blanco_lanza_error(self, campo):
        datos = {"nombre": "Juan", "email": "juan@empresa.com", "telefono": "123"}
        datos[campo] = "  "

        with pytest.raises(ValidationError) as exc_info:
            Cliente.crear(**datos)

        assert exc_info.value.field == campo


# =============================================================================
# Repositorio
# =============================================================================

class TestInMemoryClienteRepository:
    """Búsquedas específicas de clientes."""

    def test_cumple_el_protocolo(self, cliente_repo):
        assert isinstance(cliente_repo, ClienteRepository)

    def test_find_by_nombre_containing(self, cliente_repo, cliente_guardado):
        cliente_repo.save(Cliente(nombre="María García", email="maria@empresa.com", telefono="1"))

        resultado = cliente_repo.find_by_nombre_containing("PÉR")

        assert [c.id for c in resultado] == [cliente_guardado.id]

    def test_find_by_email_ignora_mayusculas(self, cliente_repo, cliente_guardado):
        assert cliente_repo.find_by_email("JUAN@Empresa.com") == cliente_guardado

    def test_find_by_email_inexistente(self, cliente_repo, cliente_guardado):
        assert cliente_repo.find_by_email("nadie@empresa.com") is None

    def test_find_by_email_no_es_subcadena(self, cliente_repo, cliente_guardado):
        assert cliente_repo.find_by_email("juan@empresa") is None


# =============================================================================
# Service
# =============================================================================

class TestClienteServiceCreate:
    """Tests de ClienteService.create."""

    def test_create_asigna_id(self, cliente_service):
        cliente = cliente_service.create(dto())

        assert cliente.id == 1
        assert cliente_service.find_by_id(1) == cliente

    def test_create_none_lanza_error(self, cliente_service):
        with pytest.raises(ValidationError):
            cliente_service.create(None)

    def test_create_sin_email_lanza_error(self, cliente_service):
        with pytest.raises(ValidationError) as exc_info:
            cliente_service.create(dto(email=None))

        assert exc_info.value.field == "email"
        assert cliente_service.count() == 0

    def test_output_dto(self, cliente_service):
        cliente = cliente_service.create(dto())

        output = ClienteOutputDTO.from_entity(cliente).to_dict()

        assert output == {
            "id": 1,
            "nombre": "Juan Pérez",
            "email": "juan@empresa.com",
            "telefono": "123456789",
        }


class TestClienteServiceUpdate:
    """Actualización PARCIAL."""

    def test_solo_cambian_los_campos_informados(self, cliente_service):
        cliente = cliente_service.create(dto())

        actualizado = cliente_service.update(cliente.id, ClienteInputDTO(telefono="555"))

        assert actualizado.telefono == "555"
        assert actualizado.nombre == "Juan Pérez"
        assert actualizado.email == "juan@empresa.com"
        assert cliente_service.find_by_id(cliente.id).telefono == "555"

    def test_campos_en_blanco_se_ignoran(self, cliente_service):
        cliente = cliente_service.create(dto())

        actualizado = cliente_service.update(
            cliente.id, ClienteInputDTO(nombre="  ", email="", telefono=None)
        )

        assert actualizado == cliente

    def test_inexistente_lanza_not_found(self, cliente_service):
        with pytest.raises(EntityNotFoundError) as exc_info:
            cliente_service.update(42, dto())

        assert exc_info.value.entity_type == "Cliente"
        assert exc_info.value.entity_id == 42

    def test_id_none_lanza_error(self, cliente_service):
        with pytest.raises(ValidationError):
            cliente_service.update(None, dto())

    def test_dto_none_lanza_error(self, cliente_service):
        cliente = cliente_service.create(dto())

        with pytest.raises(ValidationError):
            cliente_service.update(cliente.id, None)


class TestClienteServiceDelete:
    """delete es idempotente."""

    def test_delete(self, cliente_service):
        cliente = cliente_service.create(dto())

        cliente_service.delete(cliente.id)

        assert cliente_service.find_by_id(cliente.id) is None
        assert cliente_service.exists_by_id(cliente.id) is False

    def test_delete_inexistente_no_falla(self, cliente_service):
        cliente_service.create(dto())

        cliente_service.delete(99)

        assert cliente_service.count() == 1

    def test_delete_dos_veces(self, cliente_service):
        cliente = cliente_service.create(dto())

        cliente_service.delete(cliente.id)
        cliente_service.delete(cliente.id)

        assert cliente_service.count() == 0

    def test_delete_id_none_lanza_error(self, cliente_service):
        with pytest.raises(ValidationError):
            cliente_service.delete(None)


class TestClienteServiceLectura:
    """Lecturas y búsquedas."""

    def test_find_all(self, cliente_service):
        cliente_service.create(dto())
        cliente_service.create(dto("María García", "maria@empresa.com", "987654321"))

        assert [c.nombre for c in cliente_service.find_all()] == ["Juan Pérez", "María García"]

    def test_obtener_inexistente(self, cliente_service):
        with pytest.raises(EntityNotFoundError):
            cliente_service.obtener(1)

    def test_busquedas(self, cliente_service):
        cliente = cliente_service.create(dto())

        assert cliente_service.find_by_nombre_containing("juan") == [cliente]
        assert cliente_service.find_by_email("juan@empresa.com") == cliente

    def test_busqueda_en_blanco_lanza_error(self, cliente_service):
        with pytest.raises(ValidationError):
            cliente_service.find_by_nombre_containing("")
