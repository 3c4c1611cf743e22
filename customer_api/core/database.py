"""
Database Layer
==============
Engine, sessões e dependências do SQLAlchemy.

Características:
- ✅ Connection pooling por ambiente
- ✅ Uma sessão por requisição, sempre fechada
- ✅ Rollback em erro
- ✅ Health check
"""

import logging
import time
from contextlib import contextmanager
from typing import Annotated

from fastapi import Depends
from sqlalchemy import create_engine, event, text
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import QueuePool, StaticPool

from customer_api.core.config import config
from customer_api.core.exceptions import CustomerApiError
from customer_api.core.models import Base

logger = logging.getLogger(__name__)


# ═══════════════════════════════════════════════════════════
# CONFIGURAÇÕES
# ═══════════════════════════════════════════════════════════

class DatabaseConfig:
    """Configurações centralizadas do banco de dados"""

    # Pool de Conexões - Produção
    PRODUCTION_POOL_SIZE = 20
    PRODUCTION_MAX_OVERFLOW = 20
    PRODUCTION_POOL_TIMEOUT = 10  # Timeout de 10s
    PRODUCTION_POOL_RECYCLE = 1800  # Recicla a cada 30min

    # Pool de Conexões - Desenvolvimento
    DEV_POOL_SIZE = 5
    DEV_MAX_OVERFLOW = 10
    DEV_POOL_TIMEOUT = 30
    DEV_POOL_RECYCLE = 3600


# ═══════════════════════════════════════════════════════════
# ENGINE CONFIGURATION
# ═══════════════════════════════════════════════════════════

def get_engine_config(database_url: str = config.DATABASE_URL) -> dict:
    """
    Retorna configuração do engine baseada no ambiente

    Returns:
        dict: Configuração do SQLAlchemy engine
    """

    if database_url.startswith("sqlite"):
        # SQLite não suporta pool de conexões; em memória precisa de uma
        # única conexão compartilhada entre threads
        engine_config = {
            "connect_args": {"check_same_thread": False},
            "echo": config.DEBUG,
        }
        if ":memory:" in database_url or database_url == "sqlite://":
            engine_config["poolclass"] = StaticPool
        return engine_config

    if config.is_production:
        return {
            "poolclass": QueuePool,
            "pool_size": DatabaseConfig.PRODUCTION_POOL_SIZE,
            "max_overflow": DatabaseConfig.PRODUCTION_MAX_OVERFLOW,
            "pool_timeout": DatabaseConfig.PRODUCTION_POOL_TIMEOUT,
            "pool_recycle": DatabaseConfig.PRODUCTION_POOL_RECYCLE,
            "pool_pre_ping": True,
            "echo": False,
            "execution_options": {
                "isolation_level": "READ COMMITTED"
            }
        }

    return {
        "poolclass": QueuePool,
        "pool_size": DatabaseConfig.DEV_POOL_SIZE,
        "max_overflow": DatabaseConfig.DEV_MAX_OVERFLOW,
        "pool_timeout": DatabaseConfig.DEV_POOL_TIMEOUT,
        "pool_recycle": DatabaseConfig.DEV_POOL_RECYCLE,
        "pool_pre_ping": True,
        "echo": config.DEBUG,
    }


engine = create_engine(config.DATABASE_URL, **get_engine_config())


@event.listens_for(engine, "connect")
def receive_connect(dbapi_conn, connection_record):
    """Executado quando uma nova conexão é criada"""
    logger.debug("🔵 Nova conexão criada no pool")


# ═══════════════════════════════════════════════════════════
# SESSION MAKER
# ═══════════════════════════════════════════════════════════

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine,
    expire_on_commit=False
)


def init_db(bind=None):
    """Cria as tabelas que ainda não existem"""
    Base.metadata.create_all(bind=bind or engine)


# ═══════════════════════════════════════════════════════════
# DATABASE DEPENDENCIES
# ═══════════════════════════════════════════════════════════

def get_db():
    """
    Dependency que entrega uma sessão por requisição

    Features:
    - ✅ Rollback em erro
    - ✅ Logging de exceções
    - ✅ Fechamento garantido
    """
    db = SessionLocal()
    try:
        yield db
    except CustomerApiError:
        # Erro de domínio: já vira resposta HTTP, sem traceback no log
        db.rollback()
        raise
    except Exception as e:
        logger.error(f"❌ Erro na sessão: {e}", exc_info=True)
        db.rollback()
        raise
    finally:
        db.close()


get_db_manager = contextmanager(get_db)

GetDBDep = Annotated[Session, Depends(get_db)]


# ═══════════════════════════════════════════════════════════
# HEALTH CHECK
# ═══════════════════════════════════════════════════════════

def check_database_health(db: Session) -> dict:
    """
    Verifica se o banco responde a uma query simples

    Returns:
        dict: Status de saúde com latência em ms
    """
    started = time.perf_counter()
    try:
        db.execute(text("SELECT 1")).scalar()
    except Exception as e:
        logger.error(f"❌ Health check do banco falhou: {e}")
        return {
            "healthy": False,
            "timestamp": time.time(),
            "error": str(e),
        }

    return {
        "healthy": True,
        "timestamp": time.time(),
        "latency_ms": round((time.perf_counter() - started) * 1000, 2),
    }
