"""Filas serializables y traducción de errores del motor en el repositorio."""

from datetime import date, datetime
from decimal import Decimal
from uuid import UUID

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from repositorios.repositorio_entidades import RepositorioEntidades, convertir_fila
from servicios.errores import ErrorConflicto, ErrorNoEncontrado, ErrorTransporte
from tests.dobles import error_llave_unica


def test_convertir_fila():
    fila = convertir_fila({
        "id": 1,
        "creado": datetime(2024, 3, 1, 10, 30),
        "fecha": date(2024, 3, 1),
        "saldo": Decimal("10.50"),
        "codigo": UUID("12345678-1234-5678-1234-567812345678"),
        "foto": b"\xff\x00\x10",
        "firma": memoryview(b"abc"),
        "notas": None,
    })

    assert fila == {
        "id": 1,
        "creado": "2024-03-01T10:30:00",
        "fecha": "2024-03-01",
        "saldo": 10.5,
        "codigo": "12345678-1234-5678-1234-567812345678",
        "foto": "/wAQ",
        "firma": "YWJj",
        "notas": None,
    }


@pytest.mark.asyncio
async def test_llave_duplicada_sale_como_conflicto(control, conexion):
    conexion.error_comando = error_llave_unica()

    with pytest.raises(ErrorConflicto) as error:
        await RepositorioEntidades(control).crear("usuario", {"email": "a@b.com"})

    assert error.value.estado == 409
    assert error.value.codigo_bd == 1062
    assert isinstance(error.value.__cause__, IntegrityError)
    assert control.abiertas == control.cerradas == 1


@pytest.mark.asyncio
async def test_tabla_inexistente_sale_como_no_encontrado(control):
    with pytest.raises(ErrorNoEncontrado) as error:
        await RepositorioEntidades(control).obtener_filas("fantasma")

    assert error.value.codigo_bd == 208
    assert "Invalid object name 'fantasma'" in str(error.value)


@pytest.mark.asyncio
async def test_motor_caido_sale_como_transporte(control, conexion):
    conexion.error_consulta = OperationalError("SELECT", {}, Exception("connection refused"))

    with pytest.raises(ErrorTransporte) as error:
        await RepositorioEntidades(control).obtener_por_clave("usuario", "id", "1")

    assert str(error.value) == "Error (500): connection refused"
    assert control.abiertas == control.cerradas == 1
