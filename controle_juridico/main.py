"""
Controle Jurídico - Main Application
FastAPI application para controle de tarefas jurídicas e processos
"""

from fastapi import FastAPI, Request, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from motor.motor_asyncio import AsyncIOMotorClient
import uvicorn
import logging
import sys
from typing import Optional
from datetime import datetime

from controle_juridico import __version__
from controle_juridico.core.config import Settings, get_settings, validate_settings
from controle_juridico.routes import health_router, painel_router, processos_router, tarefas_router
from controle_juridico.routes.dependencies import set_repositories
from controle_juridico.services.errors import PersistenciaError
from controle_juridico.services.repositorio import ProcessoRepository, TarefaRepository


# Configure logging
def configure_logging(settings: Settings):
    """Configure logging for the application"""
    log_level = settings.LOG_LEVEL.upper()
    level = getattr(logging, log_level, logging.INFO)

    # Configure root logger
    logging.basicConfig(
        level=level,
        format=settings.LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error", "controle_juridico"]:
        logging.getLogger(logger_name).setLevel(level)

    logger = logging.getLogger(__name__)
    logger.info(f"Logging configured with level: {log_level}")
    return logger


def _error_body(request: Request, error_code: str, message: str, retry_allowed: bool, details=None) -> dict:
    body = {
        "status": "error",
        "error_code": error_code,
        "error_message": message,
        "retry_allowed": retry_allowed,
        "timestamp": datetime.now().isoformat(),
        "path": str(request.url.path),
    }
    if details:
        body["details"] = details
    return body


async def persistencia_exception_handler(request: Request, exc: PersistenciaError):
    """
    Handler for typed persistence errors

    Write failures reach the client so the user can retry
    """
    logger = logging.getLogger(__name__)
    log_level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
    logger.log(
        log_level,
        f"❌ [{exc.error_code}] {exc.message} | Status: {exc.status_code} | Path: {request.url.path}",
    )
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, exc.error_code, exc.message, exc.retry_allowed, exc.details),
    )


async def http_exception_handler(request: Request, exc: HTTPException):
    """Custom handler for HTTPException to return structured error responses"""
    logger = logging.getLogger(__name__)

    retry_allowed = exc.status_code in [408, 429, 500, 502, 503, 504]

    error_code_map = {
        400: "VALIDATION_ERROR",
        403: "PERMISSION_DENIED",
        404: "NOT_FOUND",
        422: "UNPROCESSABLE_ENTITY",
        500: "INTERNAL_ERROR",
        503: "SERVICE_UNAVAILABLE",
    }
    error_code = error_code_map.get(exc.status_code, f"HTTP_{exc.status_code}")

    log_level = logging.ERROR if exc.status_code >= 500 else logging.WARNING
    logger.log(
        log_level,
        f"❌ [{error_code}] {exc.detail} | Status: {exc.status_code} | Path: {request.url.path}",
    )

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, error_code, str(exc.detail), retry_allowed),
    )


async def generic_exception_handler(request: Request, exc: Exception):
    """Generic exception handler for unhandled exceptions"""
    logger = logging.getLogger(__name__)
    logger.error(
        f"💥 Unhandled exception: {exc} | Path: {request.url.path}",
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content=_error_body(request, "INTERNAL_ERROR", str(exc), True),
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan management"""
    settings: Settings = app.state.settings
    logger = configure_logging(settings)

    logger.info("🚀 Starting Controle Jurídico...")
    validate_settings(settings)

    tarefas = TarefaRepository(settings)
    processos = ProcessoRepository(settings)
    client: Optional[AsyncIOMotorClient] = None

    try:
        client = AsyncIOMotorClient(settings.MONGODB_URI, **settings.get_mongodb_connection_options())
        await client.admin.command("ping")
        await tarefas.connect(client)
        await processos.connect(client)
        logger.info(f"📊 MongoDB connected: {settings.MONGODB_DATABASE}")
    except Exception as e:
        # Reads degrade to empty lists, writes answer BACKEND_MISCONFIGURED
        logger.error(f"❌ MongoDB indisponível, API iniciada sem persistência: {e}")

    set_repositories(tarefas, processos)
    logger.info(f"✅ Controle Jurídico started on port {settings.PORT}")

    yield

    logger.info("⏹️ Shutting down Controle Jurídico...")
    await tarefas.disconnect()
    await processos.disconnect()
    if client:
        client.close()
    set_repositories(None, None)
    logger.info("👋 Controle Jurídico stopped")


tags_metadata = [
    {
        "name": "health",
        "description": "Health check e status da conexão com o MongoDB."
    },
    {
        "name": "tarefas",
        "description": "Tarefas jurídicas: cadastro, listagem com situação do prazo, atualização e exclusão."
    },
    {
        "name": "processos",
        "description": "Processos judiciais identificados pelo número CNJ (validado pelo dígito verificador)."
    },
    {
        "name": "painel",
        "description": "Contadores do painel e utilitário de validação/formatação de número CNJ."
    },
]


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the FastAPI application

    Args:
        settings: Explicit configuration; built from the environment when omitted
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.APP_NAME,
        description="API para controle de tarefas jurídicas e processos judiciais.",
        version=__version__,
        openapi_tags=tags_metadata,
        lifespan=lifespan,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health_router)
    app.include_router(tarefas_router)
    app.include_router(processos_router)
    app.include_router(painel_router)

    app.add_exception_handler(PersistenciaError, persistencia_exception_handler)
    app.add_exception_handler(HTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    return app


app = create_app()


if __name__ == "__main__":
    _settings = app.state.settings
    configure_logging(_settings)

    uvicorn.run(
        "controle_juridico.main:app",
        host=_settings.HOST,
        port=_settings.PORT,
        reload=_settings.DEBUG,
        log_level=_settings.LOG_LEVEL.lower(),
    )
