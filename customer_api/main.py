# customer_api/main.py
"""
Aplicação Principal - Customer API
==================================
"""

import logging
import sys
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from customer_api.api import router as api_router
from customer_api.core.config import config
from customer_api.core.database import init_db
from customer_api.core.exceptions import DuplicateResourceError, ResourceNotFoundError
from customer_api.core.middleware.correlation import CorrelationIdMiddleware

logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    handlers=[logging.StreamHandler(sys.stdout)]
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Gerencia ciclo de vida da aplicação"""

    logger.info("=" * 60)
    logger.info("🚀 INICIANDO CUSTOMER API")
    logger.info("=" * 60)

    logger.info("📊 Criando tabelas do banco de dados...")
    init_db()

    logger.info(f"🌍 Ambiente: {config.ENVIRONMENT}")
    logger.info(f"🔐 Debug Mode: {config.DEBUG}")
    logger.info("✅ APLICAÇÃO PRONTA!")

    yield

    logger.info("🛑 DESLIGANDO APLICAÇÃO")


# ═══════════════════════════════════════════════════════════
# TRATAMENTO DE ERROS
# ═══════════════════════════════════════════════════════════

async def not_found_handler(request: Request, exc: ResourceNotFoundError):
    """Handler para recurso inexistente"""
    return JSONResponse(
        status_code=404,
        content={
            "error": "Not Found",
            "message": exc.message,
            "path": str(request.url.path)
        }
    )


async def duplicate_handler(request: Request, exc: DuplicateResourceError):
    """Handler para violação de unicidade"""
    return JSONResponse(
        status_code=409,
        content={
            "error": "Conflict",
            "message": exc.message,
            "path": str(request.url.path)
        }
    )


async def value_error_handler(request: Request, exc: ValueError):
    """Handler para erros de validação"""
    return JSONResponse(
        status_code=400,
        content={
            "error": "Validation Error",
            "message": str(exc),
            "path": str(request.url.path)
        }
    )


def create_app() -> FastAPI:
    app = FastAPI(
        title="Customer API",
        version="1.0.0",
        lifespan=lifespan
    )

    app.add_middleware(CorrelationIdMiddleware)

    app.add_exception_handler(ResourceNotFoundError, not_found_handler)  # type: ignore[arg-type]
    app.add_exception_handler(DuplicateResourceError, duplicate_handler)  # type: ignore[arg-type]
    app.add_exception_handler(ValueError, value_error_handler)  # type: ignore[arg-type]

    app.include_router(api_router)
    return app


app = create_app()
