"""
i_repositorio_entidades.py — Protocol del repositorio genérico de entidades
Ubicación: repositorios/abstracciones/i_repositorio_entidades.py

Principios SOLID aplicados:
- SRP: Solo acceso a datos; las validaciones de negocio están en el servicio
- DIP: El servicio depende de este contrato, no de SQLAlchemy
- ISP: Tres operaciones, las que usa la API
"""

from typing import Any, Protocol


class IRepositorioEntidades(Protocol):
    """
    Contrato para leer e insertar filas de cualquier tabla.

    Analogía del restaurante:
    - Repositorio = Bodega: "Dame todos los tomates"
    - Servicio = Chef: "Dame tomates maduros"
    - Controlador = Mesero: "El cliente pidió ensalada"
    """

    async def obtener_filas(self, nombre_tabla: str) -> list[dict[str, Any]]:
        """
        Obtiene todas las filas de una tabla.

        Args:
            nombre_tabla: Nombre de la tabla a consultar

        Returns:
            Lista de filas como diccionarios (columna → valor)
        """
        ...

    async def obtener_por_clave(
        self,
        nombre_tabla: str,
        nombre_clave: str,
        valor: str
    ) -> list[dict[str, Any]]:
        """
        Obtiene filas filtradas por igualdad sobre una columna.

        Args:
            nombre_tabla: Tabla a consultar
            nombre_clave: Columna del filtro
            valor: Valor sin tipo, tal como llegó en la URL

        Returns:
            Filas que coinciden (puede ser vacía)

        Raises:
            ErrorNoEncontrado: Si la columna no existe en el catálogo
            ErrorValidacion: Si el valor no corresponde al tipo de la columna
        """
        ...

    async def crear(self, nombre_tabla: str, datos: dict[str, Any]) -> bool:
        """
        Inserta una fila completa.

        Args:
            nombre_tabla: Tabla destino
            datos: Campos ya convertidos (y con la contraseña ya hasheada)

        Returns:
            True si se insertó
        """
        ...
