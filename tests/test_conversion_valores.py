"""Conversión de texto de la URL y de valores JSON del cuerpo."""

from datetime import date, datetime, timedelta, timezone
from decimal import Decimal

import pytest

from modelos.tipos_columna import TipoColumna
from modelos.valor_json import TipoJson, ValorJson
from servicios.conversion_valores import (
    convertir_valor,
    decodificar_entidad,
    decodificar_valor_json,
    interpretar_fecha,
)
from servicios.errores import ErrorValidacion, TipoNoSoportado


@pytest.mark.parametrize("texto, tipo, esperado", [
    ("42", TipoColumna.ENTERO, 42),
    (" -7 ", TipoColumna.ENTERO, -7),
    ("10.50", TipoColumna.DECIMAL, Decimal("10.50")),
    ("TRUE", TipoColumna.BOOLEANO, True),
    ("false", TipoColumna.BOOLEANO, False),
    ("2.5", TipoColumna.FLOTANTE, 2.5),
    ("  ana  ", TipoColumna.TEXTO, "  ana  "),
    ("2024-03-01", TipoColumna.FECHA, date(2024, 3, 1)),
    ("2024-03-01T10:30:00", TipoColumna.FECHA, date(2024, 3, 1)),
])
def test_convertir_valor_valido(texto, tipo, esperado):
    assert convertir_valor(texto, tipo) == esperado


def test_convertir_fecha_descarta_la_hora():
    resultado = convertir_valor("2024-03-01 23:59:59", TipoColumna.FECHA)
    assert type(resultado) is date


@pytest.mark.parametrize("texto, tipo, nombre", [
    ("abc", TipoColumna.ENTERO, "entero"),
    ("1.5", TipoColumna.ENTERO, "entero"),
    ("NaN", TipoColumna.DECIMAL, "decimal"),
    ("diez", TipoColumna.DECIMAL, "decimal"),
    ("1", TipoColumna.BOOLEANO, "booleano"),
    ("x", TipoColumna.FLOTANTE, "flotante"),
    ("01/03/2024", TipoColumna.FECHA, "fecha"),
    ("2024-02-30", TipoColumna.FECHA, "fecha"),
])
def test_convertir_valor_invalido(texto, tipo, nombre):
    with pytest.raises(ErrorValidacion) as error:
        convertir_valor(texto, tipo)
    assert str(error.value) == (
        f"El valor proporcionado no es válido para el tipo de datos {nombre}."
    )


def test_tipo_no_soportado_usa_nombre_del_catalogo():
    with pytest.raises(TipoNoSoportado) as error:
        convertir_valor("0x01", TipoColumna.NO_SOPORTADO, "varbinary")
    assert str(error.value) == "Tipo de dato no soportado: varbinary"
    assert error.value.estado == 400


def test_interpretar_fecha():
    assert interpretar_fecha("2024-03-01") == date(2024, 3, 1)
    assert interpretar_fecha("2024-03-01T10:30:00Z") == datetime(
        2024, 3, 1, 10, 30, tzinfo=timezone.utc
    )
    assert interpretar_fecha("2024-03-01T10:30:00-05:00").utcoffset() == timedelta(hours=-5)
    assert interpretar_fecha("hola") is None
    assert interpretar_fecha("2024-13-01") is None


def test_decodificar_valores_json():
    assert decodificar_valor_json(ValorJson.desde_python(None)) is None
    assert decodificar_valor_json(ValorJson.desde_python(True)) is True
    assert decodificar_valor_json(ValorJson.desde_python(3)) == 3
    assert decodificar_valor_json(ValorJson.desde_python(3.25)) == 3.25
    assert decodificar_valor_json(ValorJson.desde_python("2024-03-01")) == date(2024, 3, 1)
    assert decodificar_valor_json(ValorJson.desde_python("2024-02-30")) == "2024-02-30"
    assert decodificar_valor_json(ValorJson.desde_python("texto")) == "texto"


def test_valor_json_clasifica_bool_antes_que_numero():
    assert ValorJson.desde_python(False).tipo == TipoJson.BOOLEANO
    assert ValorJson.desde_python(0).tipo == TipoJson.NUMERO


def test_valor_json_rechaza_tipos_fuera_de_json():
    with pytest.raises(ValueError):
        ValorJson.desde_python(object())


def test_decodificar_entidad_conserva_objetos_como_texto():
    entidad = decodificar_entidad({
        "nombre": "Ana",
        "perfil": {"edad": 30, "ciudad": "Bogotá"},
        "etiquetas": ["a", "b"],
        "creado": "2024-03-01T10:30:00",
    })

    assert entidad["nombre"] == "Ana"
    assert entidad["perfil"] == '{"edad": 30, "ciudad": "Bogotá"}'
    assert entidad["etiquetas"] == '["a", "b"]'
    assert entidad["creado"] == datetime(2024, 3, 1, 10, 30)
    assert list(entidad) == ["nombre", "perfil", "etiquetas", "creado"]


@pytest.mark.parametrize("numero, esperado", [
    (2 ** 63 - 1, 2 ** 63 - 1),
    (-(2 ** 63), -(2 ** 63)),
    (2 ** 63, float(2 ** 63)),
    (-(2 ** 64), float(-(2 ** 64))),
])
def test_enteros_fuera_de_bigint_pasan_a_flotante(numero, esperado):
    resultado = decodificar_valor_json(ValorJson.desde_python(numero))

    assert resultado == esperado
    assert type(resultado) is type(esperado)


def test_entero_sin_representacion_en_flotante():
    with pytest.raises(ErrorValidacion):
        decodificar_valor_json(ValorJson.desde_python(10 ** 400))
