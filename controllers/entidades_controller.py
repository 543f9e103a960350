"""
entidades_controller.py — Controlador genérico para operaciones HTTP sobre cualquier tabla
Ubicación: controllers/entidades_controller.py

Principios SOLID aplicados:
- SRP: El controlador solo coordina peticiones HTTP, no contiene lógica de negocio
- DIP: Depende de abstracciones (Protocol), no de implementaciones concretas
- ISP: Consume solo los métodos necesarios del servicio

Manejo de errores:
- ErrorValidacion   → 400 (entrada mal formada, literal inválido, tipo no soportado)
- ErrorNoEncontrado → 404 (columna desconocida en el catálogo)
- Cualquier otra falla pasa por clasificar_error() → 404 / 409 / 500
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from servicios.abstracciones.i_servicio_entidades import IServicioEntidades
from servicios.clasificador_errores import clasificar_error
from servicios.errores import ErrorNoEncontrado, ErrorValidacion
from servicios.fabrica_servicios import crear_servicio_entidades


# Configurar logging
logger = logging.getLogger(__name__)

# Crear el router; {proyecto} se acepta en la ruta pero no se usa
router = APIRouter(
    prefix="/api",
    tags=["Entidades"]
)


def _error_clasificado(excepcion: Exception, tabla: str, **extra: Any) -> HTTPException:
    """Clasifica la falla y la convierte en HTTPException."""
    registro = clasificar_error(excepcion)
    logger.error(
        "ERROR (%d) - Tabla: %s, Error: %s",
        registro.estado,
        tabla,
        registro.mensaje,
        exc_info=True
    )
    return HTTPException(
        status_code=registro.estado,
        detail={
            "estado": registro.estado,
            "mensaje": registro.mensaje,
            "tabla": tabla,
            **extra
        }
    )


@router.get("/{proyecto}/{tabla}")
async def listar(
    proyecto: str,
    tabla: str,
    servicio: IServicioEntidades = Depends(crear_servicio_entidades)
):
    """
    Lista todos los registros de cualquier tabla.

    Ruta: GET /api/{proyecto}/{tabla}

    Ejemplos:
    - GET /api/miapp/usuario
    - GET /api/miapp/producto

    Una tabla vacía responde 200 con una lista vacía.
    """
    try:
        logger.info("INICIO consulta - Tabla: %s", tabla)

        filas = await servicio.listar(tabla)

        logger.info(
            "RESULTADO exitoso - Registros obtenidos: %d de tabla %s",
            len(filas),
            tabla
        )
        return filas

    except ErrorValidacion as excepcion_argumento:
        logger.warning(
            "ERROR DE VALIDACIÓN - Tabla: %s, Error: %s",
            tabla,
            str(excepcion_argumento)
        )
        raise HTTPException(
            status_code=400,
            detail={
                "estado": 400,
                "mensaje": str(excepcion_argumento),
                "tabla": tabla
            }
        )

    except Exception as excepcion_general:
        raise _error_clasificado(excepcion_general, tabla)


@router.get("/{proyecto}/{tabla}/{nombre_clave}/{valor}")
async def obtener_por_clave(
    proyecto: str,
    tabla: str,
    nombre_clave: str,
    valor: str,
    servicio: IServicioEntidades = Depends(crear_servicio_entidades)
):
    """
    Obtiene registros filtrados por un valor de clave.

    Ruta: GET /api/{proyecto}/{tabla}/{nombre_clave}/{valor}
    Ejemplos:
    - GET /api/miapp/usuario/email/ana@empresa.com
    - GET /api/miapp/factura/fecha/2024-03-01

    El tipo de la columna se consulta en el catálogo y el valor se
    convierte antes de armar la consulta.
    """
    filtro = f"{nombre_clave} = {valor}"
    try:
        logger.info(
            "INICIO filtrado - Tabla: %s, Clave: %s, Valor: %s",
            tabla,
            nombre_clave,
            valor
        )

        filas = await servicio.obtener_por_clave(tabla, nombre_clave, valor)

        logger.info(
            "RESULTADO filtrado - %d registros encontrados para %s en %s",
            len(filas),
            filtro,
            tabla
        )

        # MANEJO DE CASO SIN DATOS (404)
        if len(filas) == 0:
            raise HTTPException(
                status_code=404,
                detail={
                    "estado": 404,
                    "mensaje": f"No se encontró ningún registro con {filtro} en la tabla {tabla}",
                    "tabla": tabla,
                    "filtro": filtro
                }
            )

        return filas

    except HTTPException:
        raise

    except ErrorValidacion as excepcion_argumento:
        logger.warning(
            "ERROR DE VALIDACIÓN - Tabla: %s, Filtro: %s, Error: %s",
            tabla,
            filtro,
            str(excepcion_argumento)
        )
        raise HTTPException(
            status_code=400,
            detail={
                "estado": 400,
                "mensaje": str(excepcion_argumento),
                "tabla": tabla,
                "filtro": filtro
            }
        )

    except ErrorNoEncontrado as excepcion_no_encontrado:
        logger.warning(
            "NO ENCONTRADO - Tabla: %s, Clave: %s, Error: %s",
            tabla,
            nombre_clave,
            str(excepcion_no_encontrado)
        )
        raise HTTPException(
            status_code=404,
            detail={
                "estado": 404,
                "mensaje": str(excepcion_no_encontrado),
                "tabla": tabla,
                "filtro": filtro
            }
        )

    except Exception as excepcion_general:
        raise _error_clasificado(excepcion_general, tabla, filtro=filtro)


@router.post("/{proyecto}/{tabla}")
async def crear(
    proyecto: str,
    tabla: str,
    datos_entidad: dict[str, Any] | None = Body(default=None),
    servicio: IServicioEntidades = Depends(crear_servicio_entidades)
):
    """
    Crea un nuevo registro en la tabla especificada.

    Ruta: POST /api/{proyecto}/{tabla}
    Ejemplo: POST /api/miapp/usuario
        {"email": "nuevo@empresa.com", "contrasena": "123"}

    El primer campo cuyo nombre parece de contraseña se guarda como hash BCrypt.
    """
    try:
        logger.info(
            "INICIO creación - Tabla: %s, Campos: %s",
            tabla,
            ", ".join(datos_entidad.keys()) if datos_entidad else "ninguno"
        )

        creado = await servicio.crear(tabla, datos_entidad)

        if not creado:
            raise HTTPException(
                status_code=500,
                detail={
                    "estado": 500,
                    "mensaje": "No se pudo crear el registro.",
                    "tabla": tabla
                }
            )

        logger.info("ÉXITO creación - Registro creado en tabla %s", tabla)
        return {
            "estado": 200,
            "mensaje": "Entidad creada exitosamente.",
            "tabla": tabla
        }

    except HTTPException:
        raise

    except ErrorValidacion as excepcion_argumento:
        logger.warning(
            "ERROR DE VALIDACIÓN - Tabla: %s, Error: %s",
            tabla,
            str(excepcion_argumento)
        )
        raise HTTPException(
            status_code=400,
            detail={
                "estado": 400,
                "mensaje": str(excepcion_argumento),
                "tabla": tabla
            }
        )

    except Exception as excepcion_general:
        raise _error_clasificado(excepcion_general, tabla)
