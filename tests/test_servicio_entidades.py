import pytest

from servicios.errores import ErrorValidacion
from servicios.servicio_entidades import ServicioEntidades


class RepositorioEspia:
    def __init__(self):
        self.llamadas = []

    async def obtener_filas(self, nombre_tabla):
        self.llamadas.append(("obtener_filas", nombre_tabla))
        return []

    async def obtener_por_clave(self, nombre_tabla, nombre_clave, valor):
        self.llamadas.append(("obtener_por_clave", nombre_tabla, nombre_clave, valor))
        return []

    async def crear(self, nombre_tabla, datos):
        self.llamadas.append(("crear", nombre_tabla, datos))
        return True


@pytest.fixture
def repositorio():
    return RepositorioEspia()


@pytest.fixture
def servicio(repositorio):
    return ServicioEntidades(repositorio, hasher=lambda valor: f"hash:{valor}")


def test_requiere_repositorio():
    with pytest.raises(ValueError):
        ServicioEntidades(None)


@pytest.mark.asyncio
async def test_listar_recorta_el_nombre_de_la_tabla(servicio, repositorio):
    await servicio.listar("  usuario ")
    assert repositorio.llamadas == [("obtener_filas", "usuario")]


@pytest.mark.asyncio
@pytest.mark.parametrize("tabla", ["", "   ", None])
async def test_listar_tabla_vacia(servicio, repositorio, tabla):
    with pytest.raises(ErrorValidacion):
        await servicio.listar(tabla)
    assert repositorio.llamadas == []


@pytest.mark.asyncio
async def test_obtener_por_clave_entrega_el_valor_sin_recortar(servicio, repositorio):
    await servicio.obtener_por_clave("usuario", " email ", " ana ")
    assert repositorio.llamadas == [("obtener_por_clave", "usuario", "email", " ana ")]


@pytest.mark.asyncio
@pytest.mark.parametrize("tabla, clave, valor", [
    ("", "id", "1"), ("usuario", " ", "1"), ("usuario", "id", ""),
])
async def test_obtener_por_clave_con_parametros_vacios(servicio, repositorio, tabla, clave, valor):
    with pytest.raises(ErrorValidacion) as error:
        await servicio.obtener_por_clave(tabla, clave, valor)
    assert error.value.estado == 400
    assert repositorio.llamadas == []


@pytest.mark.asyncio
async def test_crear_decodifica_y_hashea_antes_de_insertar(servicio, repositorio):
    creado = await servicio.crear("usuario", {"email": "a@b.com", "password": "123", "extra": [1]})

    assert creado is True
    assert repositorio.llamadas == [
        ("crear", "usuario", {"email": "a@b.com", "password": "hash:123", "extra": "[1]"})
    ]


@pytest.mark.asyncio
@pytest.mark.parametrize("datos", [None, {}])
async def test_crear_sin_datos(servicio, repositorio, datos):
    with pytest.raises(ErrorValidacion):
        await servicio.crear("usuario", datos)
    assert repositorio.llamadas == []
