"""
constructor_sql.py — Armado de sentencias SELECT / INSERT parametrizadas
Ubicación: repositorios/constructor_sql.py

Reglas:
- Los VALORES viajan siempre como parámetros enlazados (:valor, :v0, ...).
- Los IDENTIFICADORES (tabla y columnas) pedidos por el cliente se
  interpolan en el texto SQL, y todos pasan por una sola función
  formateadora. Por defecto esa función los deja intactos: es una
  superficie de inyección a nivel de identificador, conocida y aceptada.
  Un despliegue que necesite comillas o lista blanca inyecta otro
  formateador en ConstructorSql sin tocar el resto.
"""

from typing import Any, Callable

from modelos.sentencia import ParametroTipado, Sentencia
from modelos.tipos_columna import TipoColumna


FormateadorIdentificador = Callable[[str], str]


def formatear_identificador(nombre: str) -> str:
    """Formateador por defecto: el identificador va tal cual."""
    return nombre


# Comillas por proveedor (estrategia "citado")
def _citar_corchetes(nombre: str) -> str:
    return "[" + nombre.replace("]", "]]") + "]"


def _citar_comillas_dobles(nombre: str) -> str:
    return '"' + nombre.replace('"', '""') + '"'


def _citar_acento_grave(nombre: str) -> str:
    return "`" + nombre.replace("`", "``") + "`"


_CITADORES: dict[str, FormateadorIdentificador] = {
    "sqlserver":        _citar_corchetes,
    "sqlserverexpress": _citar_corchetes,
    "localdb":          _citar_corchetes,
    "postgres":         _citar_comillas_dobles,
    "postgresql":       _citar_comillas_dobles,
    "mysql":            _citar_acento_grave,
    "mariadb":          _citar_acento_grave,
}


def obtener_formateador(estrategia: str, proveedor: str) -> FormateadorIdentificador:
    """
    Devuelve el formateador de identificadores configurado.

    Args:
        estrategia: 'literal' (sin cambios) o 'citado' (comillas del motor)
        proveedor: Proveedor de BD activo

    Raises:
        ValueError: Si la estrategia o el proveedor no son conocidos
    """
    estrategia = (estrategia or "literal").strip().lower()
    if estrategia == "literal":
        return formatear_identificador
    if estrategia == "citado":
        citador = _CITADORES.get(proveedor)
        if citador is None:
            raise ValueError(
                f"Proveedor '{proveedor}' no tiene estrategia de comillas registrada. "
                f"Proveedores disponibles: {list(_CITADORES.keys())}"
            )
        return citador
    raise ValueError(
        f"Estrategia de identificadores '{estrategia}' no soportada. "
        "Opciones: ['literal', 'citado']"
    )


class ConstructorSql:
    """
    Construye sentencias para una sola tabla y un solo predicado.

    No hay joins, filtros arbitrarios ni sentencias múltiples.
    """

    def __init__(self, formateador: FormateadorIdentificador = formatear_identificador):
        self._formatear = formateador

    def construir_seleccion_total(self, nombre_tabla: str) -> Sentencia:
        """SELECT sin condiciones sobre toda la tabla."""
        tabla = self._formatear(nombre_tabla)
        return Sentencia(sql=f"SELECT * FROM {tabla}")

    def construir_seleccion_por_clave(
        self,
        nombre_tabla: str,
        nombre_clave: str,
        valor: Any,
        tipo: TipoColumna
    ) -> Sentencia:
        """
        SELECT con un predicado de igualdad sobre la columna clave.

        Para columnas de fecha la columna se convierte a DATE, de modo que
        la hora guardada no impide la igualdad contra una fecha sin hora.
        """
        tabla = self._formatear(nombre_tabla)
        columna = self._formatear(nombre_clave)

        if tipo == TipoColumna.FECHA:
            predicado = f"CAST({columna} AS DATE) = :valor"
        else:
            predicado = f"{columna} = :valor"

        return Sentencia(
            sql=f"SELECT * FROM {tabla} WHERE {predicado}",
            parametros=[ParametroTipado(nombre="valor", valor=valor)]
        )

    def construir_insercion(self, nombre_tabla: str, entidad: dict[str, Any]) -> Sentencia:
        """
        INSERT de una fila completa.

        La lista de columnas sale de los nombres de campo; cada valor va en
        su propio parámetro (:v0, :v1, ...) en el mismo orden.
        """
        if not entidad:
            raise ValueError("La entidad a insertar no tiene campos.")

        tabla = self._formatear(nombre_tabla)
        columnas = ", ".join(self._formatear(campo) for campo in entidad)

        parametros = [
            ParametroTipado(nombre=f"v{indice}", valor=valor)
            for indice, valor in enumerate(entidad.values())
        ]
        marcadores = ", ".join(f":{p.nombre}" for p in parametros)

        return Sentencia(
            sql=f"INSERT INTO {tabla} ({columnas}) VALUES ({marcadores})",
            parametros=parametros
        )

    def construir_consulta_catalogo(self, nombre_tabla: str, nombre_columna: str) -> Sentencia:
        """Consulta del tipo declarado; ambos nombres van como parámetros."""
        return Sentencia(
            sql=(
                "SELECT data_type FROM information_schema.columns "
                "WHERE table_name = :nombre_tabla AND column_name = :nombre_columna"
            ),
            parametros=[
                ParametroTipado(nombre="nombre_tabla", valor=nombre_tabla),
                ParametroTipado(nombre="nombre_columna", valor=nombre_columna),
            ]
        )
