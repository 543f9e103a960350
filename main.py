"""
main.py — Punto de entrada de la API de entidades dinámicas
Ubicación: main.py

Configuración de:
- Logging
- Aplicación FastAPI (Swagger incluido)
- CORS (Cross-Origin Resource Sharing)
- Registro de controladores (routers)
- Manejador de errores de la API fuera de los controladores

Arquitectura:
    main.py
        │
        ├── 1. Cargar configuración y logging
        ├── 2. Crear aplicación FastAPI (ciclo de vida: cierre de pools)
        ├── 3. Configurar CORS
        ├── 4. Registrar controladores (routers)
        └── 5. Endpoint raíz de diagnóstico
"""

# ================================================================
# IMPORTS
# ================================================================

import logging
from contextlib import asynccontextmanager

# FastAPI y middleware
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# Configuración
from config import get_settings

# Controladores
from controllers import entidades_controller
from servicios.clasificador_errores import clasificar_error
from servicios.conexion.control_conexion import ControlConexion
from servicios.errores import ErrorApi


# ================================================================
# CARGAR CONFIGURACIÓN Y LOGGING
# ================================================================

settings = get_settings()

logging.basicConfig(
    level="DEBUG" if settings.debug else settings.log_level.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
logger = logging.getLogger(__name__)


# ================================================================
# CICLO DE VIDA
# ================================================================

@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Inicio: registra entorno y proveedor.
    Cierre: libera los pools de conexiones del proceso.
    """
    logger.info(
        "API iniciada en modo: %s | Proveedor BD: %s",
        settings.environment,
        settings.database.provider
    )
    yield
    await ControlConexion.cerrar_motores()
    logger.info("API detenida - pools de conexiones liberados")


# ================================================================
# CREAR APLICACIÓN FASTAPI
# ================================================================

app = FastAPI(
    title="API de Entidades Dinámicas",
    description="""
API REST para listar, buscar por clave e insertar en cualquier tabla,
sin modelos definidos de antemano.

**Características:**
- Soporta SQL Server, PostgreSQL, MySQL/MariaDB
- Tipo de la columna clave detectado en information_schema
- Valores siempre enviados como parámetros
- Campos de contraseña guardados con BCrypt
    """,
    version="1.0.0",
    docs_url="/swagger",
    redoc_url="/redoc",
    openapi_url="/swagger/v1/swagger.json",
    lifespan=lifespan,
)


# ================================================================
# CONFIGURACIÓN DE CORS
# ================================================================

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ================================================================
# ERRORES FUERA DE LOS CONTROLADORES
# ================================================================

@app.exception_handler(ErrorApi)
async def manejar_error_api(request: Request, excepcion: ErrorApi):
    """
    Errores levantados al resolver dependencias (por ejemplo, configuración
    incompleta) antes de entrar al controlador.
    """
    registro = clasificar_error(excepcion)
    logger.error("ERROR (%d) - %s %s: %s", registro.estado, request.method, request.url.path, registro.mensaje)
    return JSONResponse(
        status_code=registro.estado,
        content={"detail": {"estado": registro.estado, "mensaje": registro.mensaje}}
    )


# ================================================================
# REGISTRO DE CONTROLADORES (ROUTERS)
# ================================================================

app.include_router(entidades_controller)


# ================================================================
# ENDPOINT RAÍZ (DIAGNÓSTICO)
# ================================================================

@app.get("/", tags=["Diagnóstico"])
async def root():
    """
    Endpoint raíz para verificar que la API está funcionando.

    Returns:
        dict: Estado de la API con versión y enlaces útiles
    """
    return {
        "mensaje": "API de entidades dinámicas está funcionando",
        "version": "1.0.0",
        "entorno": settings.environment,
        "proveedor": settings.database.provider,
        "documentacion": {
            "swagger": "/swagger",
            "redoc": "/redoc",
            "openapi": "/swagger/v1/swagger.json"
        }
    }


# ================================================================
# EJECUCIÓN DIRECTA (DESARROLLO)
# ================================================================

# Permite ejecutar con: python main.py
# En producción usar: uvicorn main:app --host 0.0.0.0 --port 8000

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level="debug" if settings.debug else "info"
    )
