"""
proveedor_conexion.py — Resolución del proveedor activo y su URL de conexión
Ubicación: servicios/conexion/proveedor_conexion.py
"""

from config import Settings, get_settings
from servicios.errores import ErrorConfiguracion


# Nombre de proveedor → campo de DatabaseSettings con su URL
_CAMPOS_CADENA: dict[str, str] = {
    "sqlserver": "sqlserver",
    "sqlserverexpress": "sqlserverexpress",
    "localdb": "localdb",
    "postgres": "postgres",
    "postgresql": "postgres",
    "mysql": "mysql",
    "mariadb": "mariadb",
}


class ProveedorConexion:
    """Lee DB_PROVIDER, DB_IDENTIFICADORES y la URL del proveedor activo."""

    def __init__(self, settings: Settings | None = None):
        self._settings = settings or get_settings()

    @property
    def proveedor_actual(self) -> str:
        """
        Proveedor en minúsculas y sin espacios.

        Raises:
            ErrorConfiguracion: Si DB_PROVIDER está vacío
        """
        proveedor = (self._settings.database.provider or "").strip().lower()
        if not proveedor:
            raise ErrorConfiguracion("Proveedor de base de datos no configurado.")
        return proveedor

    @property
    def estrategia_identificadores(self) -> str:
        return self._settings.database.identificadores.strip().lower()

    def obtener_cadena_conexion(self) -> str:
        """
        URL async de SQLAlchemy del proveedor activo.

        Raises:
            ErrorConfiguracion: Proveedor desconocido o sin URL configurada
        """
        proveedor = self.proveedor_actual

        campo = _CAMPOS_CADENA.get(proveedor)
        if campo is None:
            raise ErrorConfiguracion(
                f"Proveedor '{proveedor}' no soportado. "
                f"Opciones: {list(_CAMPOS_CADENA)}"
            )

        cadena = getattr(self._settings.database, campo)
        if not cadena:
            raise ErrorConfiguracion(
                f"No hay cadena de conexión para '{proveedor}'. "
                f"Definir DB_{campo.upper()} en .env"
            )
        return cadena
