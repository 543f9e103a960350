"""
i_servicio_entidades.py — Protocol que define el contrato de la lógica de negocio
Ubicación: servicios/abstracciones/i_servicio_entidades.py

Principios SOLID aplicados:
- SRP: Solo define operaciones de lógica de negocio
- DIP: Permite que el controlador dependa de esta abstracción
- ISP: Protocol específico y pequeño
"""

from typing import Any, Protocol


class IServicioEntidades(Protocol):
    """
    Contrato del servicio genérico de entidades.

    La capa de servicios aplica la lógica de negocio:
    - Validaciones de entrada
    - Transformación de datos (decodificación JSON, hash de contraseñas)
    - Aislamiento de la lógica de negocio respecto al acceso a datos
    """

    async def listar(self, nombre_tabla: str) -> list[dict[str, Any]]:
        """
        Lista todas las filas de una tabla.

        Raises:
            ErrorValidacion: Si el nombre de la tabla está vacío
        """
        ...

    async def obtener_por_clave(
        self,
        nombre_tabla: str,
        nombre_clave: str,
        valor: str
    ) -> list[dict[str, Any]]:
        """
        Obtiene registros filtrados por una clave.

        Raises:
            ErrorValidacion: Parámetros vacíos, literal inválido o tipo no soportado
            ErrorNoEncontrado: La columna no existe en el catálogo
        """
        ...

    async def crear(self, nombre_tabla: str, datos: dict[str, Any] | None) -> bool:
        """
        Crea un nuevo registro.

        Returns:
            True si se creó correctamente
        """
        ...
