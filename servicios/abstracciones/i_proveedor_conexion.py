"""
i_proveedor_conexion.py — Protocol que define el contrato para obtener la configuración de conexión
Ubicación: servicios/abstracciones/i_proveedor_conexion.py

Principios SOLID aplicados:
- SRP: Este Protocol solo se encarga de definir operaciones relacionadas con conexiones
- DIP: Permite que otras clases dependan de esta abstracción, no de implementaciones concretas
- ISP: Protocol específico y pequeño, solo métodos relacionados con conexiones
"""

from typing import Protocol


class IProveedorConexion(Protocol):
    """
    Contrato que define cómo obtener información de conexión a base de datos.

    Beneficios:
    - Facilita testing (se pueden crear dobles de este Protocol)
    - Permite intercambiar implementaciones sin cambiar código cliente
    """

    @property
    def proveedor_actual(self) -> str:
        """
        Obtiene el nombre del proveedor de base de datos configurado.

        Valores esperados:
        - "sqlserver", "sqlserverexpress", "localdb" para Microsoft SQL Server
        - "postgres" / "postgresql" para PostgreSQL
        - "mariadb" / "mysql" para MariaDB y MySQL

        Returns:
            Nombre del proveedor en minúsculas

        Raises:
            ErrorConfiguracion: Si no hay proveedor configurado
        """
        ...

    @property
    def estrategia_identificadores(self) -> str:
        """
        Cómo se escriben tablas y columnas en el SQL: 'literal' o 'citado'.
        """
        ...

    def obtener_cadena_conexion(self) -> str:
        """
        Obtiene la cadena de conexión (URL async de SQLAlchemy) del proveedor configurado.

        Raises:
            ErrorConfiguracion: Cuando no existe configuración para el proveedor actual
        """
        ...


# =============================================================================
# NOTAS
# =============================================================================
#
# 1. ¿POR QUÉ NO ES ASYNC?
#    - Obtener la cadena de conexión es una operación de configuración
#    - No requiere I/O de base de datos
#    - La conexión real (que sí es async) la abre ControlConexion
#
# 2. ¿POR QUÉ ErrorConfiguracion Y NO ValueError?
#    - Los controladores traducen ValueError a 400 (culpa del cliente)
#    - Una configuración faltante es culpa del servidor: debe salir como 500
