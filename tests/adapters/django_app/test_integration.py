"""
Tests de Integración para el adapter Django.

Testa la integración entre:
- URLs ↔ API Views
- Views ↔ Services reales del container
- Forms ↔ DTOs

Estrategia:
- Django test Client contra src.config.urls
- Container real y vacío (reseteado por tests/conftest.py)
"""

import json

import pytest


def send(client, method, path, data=None):
    kwargs = {}
    if data is not None:
        kwargs = {'data': json.dumps(data), 'content_type': 'application/json'}
    response = getattr(client, method)(path, **kwargs)
    content = json.loads(response.content) if response.content else None
    return response.status_code, content


@pytest.fixture
def juan(client):
    _, content = send(client, 'post', '/api/clientes/', {
        'nombre': 'Juan Pérez', 'email': 'juan@empresa.com', 'telefono': '123456789',
    })
    return content['data']


@pytest.fixture
def carlos(client):
    _, content = send(client, 'post', '/api/tecnicos/', {
        'nombre': 'Carlos López', 'especialidad': 'redes',
    })
    return content['data']


class TestHealth:

    def test_health(self, client):
        status, content = send(client, 'get', '/health/')

        assert status == 200
        assert content == {'status': 'ok'}


class TestClientesAPI:
    """CRUD de clientes de punta a punta."""

    def test_crear_y_obtener(self, client, juan):
        assert juan['id'] == 1

        status, content = send(client, 'get', '/api/clientes/1/')

        assert status == 200
        assert content['data'] == juan

    def test_listar_y_buscar(self, client, juan):
        send(client, 'post', '/api/clientes/', {
            'nombre': 'María García', 'email': 'maria@empresa.com', 'telefono': '987654321',
        })

        _, todos = send(client, 'get', '/api/clientes/')
        _, por_nombre = send(client, 'get', '/api/clientes/?nombre=GARC')
        _, por_email = send(client, 'get', '/api/clientes/?email=JUAN@empresa.com')

        assert todos['meta']['total'] == 2
        assert [c['nombre'] for c in por_nombre['data']] == ['María García']
        assert [c['id'] for c in por_email['data']] == [juan['id']]

    def test_patch_parcial(self, client, juan):
        status, content = send(client, 'patch', '/api/clientes/1/', {'telefono': '555'})

        assert status == 200
        assert content['data']['telefono'] == '555'
        assert content['data']['email'] == 'juan@empresa.com'

    def test_put_completo(self, client, juan):
        status, content = send(client, 'put', '/api/clientes/1/', {
            'nombre': 'Juan P.', 'email': 'jp@empresa.com', 'telefono': '1',
        })

        assert status == 200
        assert content['data'] == {'id': 1, 'nombre': 'Juan P.', 'email': 'jp@empresa.com', 'telefono': '1'}

    def test_actualizar_inexistente(self, client):
        status, content = send(client, 'patch', '/api/clientes/42/', {'telefono': '1'})

        assert status == 404
        assert content['success'] is False

    def test_delete_idempotente(self, client, juan):
        primero, _ = send(client, 'delete', '/api/clientes/1/')
        segundo, _ = send(client, 'delete', '/api/clientes/1/')
        status, _ = send(client, 'get', '/api/clientes/1/')

        assert primero == 204
        assert segundo == 204
        assert status == 404


class TestTecnicosAPI:
    """Técnicos, especialidades y estadísticas."""

    def test_especialidad_normalizada(self, carlos):
        assert carlos['especialidad'] == 'Redes'

    def test_base_de_datos(self, client):
        _, content = send(client, 'post', '/api/tecnicos/', {
            'nombre': 'Luisa Fernández', 'especialidad': 'base de datos',
        })

        assert content['data']['especialidad'] == 'Base De Datos'

    def test_busquedas_y_estadisticas(self, client, carlos):
        send(client, 'post', '/api/tecnicos/', {'nombre': 'Ana Martínez', 'especialidad': 'software'})
        send(client, 'post', '/api/tecnicos/', {'nombre': 'Miguel Rodríguez', 'especialidad': 'REDES'})

        _, por_nombre = send(client, 'get', '/api/tecnicos/?nombre=aRl')
        _, por_especialidad = send(client, 'get', '/api/tecnicos/especialidad/redes/')
        _, especialidades = send(client, 'get', '/api/tecnicos/especialidades/')
        _, estadisticas = send(client, 'get', '/api/tecnicos/estadisticas/')

        assert [t['nombre'] for t in por_nombre['data']] == ['Carlos López']
        assert [t['nombre'] for t in por_especialidad['data']] == ['Carlos López', 'Miguel Rodríguez']
        assert especialidades['data'] == ['Redes', 'Software']
        assert estadisticas['data']['total'] == 3
        assert estadisticas['data']['por_especialidad'] == {'Redes': 2, 'Software': 1}

    def test_patch_especialidad(self, client, carlos):
        status, content = send(client, 'patch', '/api/tecnicos/1/', {'especialidad': 'seguridad'})

        assert status == 200
        assert content['data'] == {'id': 1, 'nombre': 'Carlos López', 'especialidad': 'Seguridad'}


class TestSolicitudesAPI:
    """Solicitudes con cliente y técnico copiados."""

    def test_crear_pending(self, client, juan):
        status, content = send(client, 'post', '/api/solicitudes/', {
            'descripcion': 'No WiFi', 'cliente_id': juan['id'],
        })

        assert status == 201
        assert content['data']['id'] == 1
        assert content['data']['estado'] == 'PENDING'
        assert content['data']['cliente'] == juan
        assert content['data']['tecnico'] is None
        assert content['data']['fecha_creacion'] is not None

    def test_cliente_inexistente(self, client):
        status, content = send(client, 'post', '/api/solicitudes/', {
            'descripcion': 'No WiFi', 'cliente_id': 9,
        })

        assert status == 404
        assert content['meta']['entity_type'] == 'Cliente'

    def test_put_reemplaza_y_vuelve_a_pending(self, client, juan, carlos):
        send(client, 'post', '/api/solicitudes/', {
            'descripcion': 'No WiFi', 'cliente_id': juan['id'],
            'tecnico_id': carlos['id'], 'estado': 'IN_PROGRESS',
        })

        status, content = send(client, 'put', '/api/solicitudes/1/', {
            'descripcion': 'Sigue sin WiFi', 'cliente_id': juan['id'],
        })

        assert status == 200
        assert content['data']['estado'] == 'PENDING'
        assert content['data']['tecnico'] is None

    def test_patch_conserva_el_resto(self, client, juan, carlos):
        send(client, 'post', '/api/solicitudes/', {
            'descripcion': 'No WiFi', 'cliente_id': juan['id'], 'tecnico_id': carlos['id'],
        })

        status, content = send(client, 'patch', '/api/solicitudes/1/', {'estado': 'RESOLVED'})

        assert status == 200
        assert content['data']['estado'] == 'RESOLVED'
        assert content['data']['descripcion'] == 'No WiFi'
        assert content['data']['tecnico']['id'] == carlos['id']

    def test_cliente_editado_no_altera_la_solicitud(self, client, juan):
        send(client, 'post', '/api/solicitudes/', {'descripcion': 'No WiFi', 'cliente_id': juan['id']})
        send(client, 'patch', '/api/clientes/1/', {'nombre': 'Juan Cambiado'})

        _, content = send(client, 'get', '/api/solicitudes/1/')

        assert content['data']['cliente']['nombre'] == 'Juan Pérez'

    def test_delete_falla_si_no_existe(self, client, juan):
        send(client, 'post', '/api/solicitudes/', {'descripcion': 'No WiFi', 'cliente_id': juan['id']})

        primero, _ = send(client, 'delete', '/api/solicitudes/1/')
        segundo, content = send(client, 'delete', '/api/solicitudes/1/')

        assert primero == 204
        assert segundo == 404
        assert content['success'] is False
