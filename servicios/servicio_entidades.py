"""
servicio_entidades.py — Lógica de negocio que coordina las operaciones sobre entidades
Ubicación: servicios/servicio_entidades.py

Principios SOLID aplicados:
- SRP: Solo lógica de negocio, delega acceso a datos al repositorio
- DIP: Depende de abstracciones (Protocol), no de implementaciones concretas
- OCP: Se puede cambiar el repositorio sin modificar este servicio
"""

from typing import Any, Callable

from repositorios.abstracciones.i_repositorio_entidades import IRepositorioEntidades
from servicios.conversion_valores import decodificar_entidad
from servicios.errores import ErrorValidacion
from servicios.transformador_sensible import transformar_campos_sensibles
from servicios.utilidades.encriptacion_bcrypt import encriptar


def _validar_texto(valor: str | None, mensaje: str) -> str:
    if not valor or not valor.strip():
        raise ErrorValidacion(mensaje)
    return valor.strip()


class ServicioEntidades:
    """
    Coordinador entre el controlador y el repositorio.

    Responsabilidades:
    - Validar parámetros antes de armar cualquier sentencia
    - Decodificar el cuerpo JSON a valores tipados
    - Reemplazar la contraseña en texto plano por su hash
    """

    def __init__(
        self,
        repositorio: IRepositorioEntidades,
        hasher: Callable[[str], str] = encriptar
    ):
        """
        Constructor que recibe dependencias mediante inyección.

        Args:
            repositorio: Repositorio para acceso a datos
            hasher: Función de hash de una vía para campos de contraseña
        """
        if repositorio is None:
            raise ValueError(
                "repositorio no puede ser None. "
                "Verificar la configuración de dependencias."
            )

        self._repositorio = repositorio
        self._hasher = hasher

    async def listar(self, nombre_tabla: str) -> list[dict[str, Any]]:
        """
        Lista todas las filas de una tabla.

        Raises:
            ErrorValidacion: Si el nombre de la tabla está vacío
        """
        tabla = _validar_texto(nombre_tabla, "El nombre de la tabla no puede estar vacío.")
        return await self._repositorio.obtener_filas(tabla)

    async def obtener_por_clave(
        self,
        nombre_tabla: str,
        nombre_clave: str,
        valor: str
    ) -> list[dict[str, Any]]:
        """Obtiene registros filtrados por clave."""
        mensaje = "El nombre de la tabla, el nombre de la clave y el valor no pueden estar vacíos."
        tabla = _validar_texto(nombre_tabla, mensaje)
        clave = _validar_texto(nombre_clave, mensaje)
        _validar_texto(valor, mensaje)

        # El valor se entrega sin recortar: en columnas de texto se compara tal cual
        return await self._repositorio.obtener_por_clave(tabla, clave, valor)

    async def crear(self, nombre_tabla: str, datos: dict[str, Any] | None) -> bool:
        """
        Crea un nuevo registro.

        Proceso:
        1. Validación de tabla y cuerpo
        2. Decodificación de valores JSON
        3. Hash del campo de contraseña
        4. Delegación al repositorio
        """
        mensaje = "El nombre de la tabla y los datos de la entidad no pueden estar vacíos."
        tabla = _validar_texto(nombre_tabla, mensaje)
        if not datos:
            raise ErrorValidacion(mensaje)

        propiedades = decodificar_entidad(datos)
        propiedades = transformar_campos_sensibles(propiedades, self._hasher)

        return await self._repositorio.crear(tabla, propiedades)
