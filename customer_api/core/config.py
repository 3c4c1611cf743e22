# customer_api/core/config.py
"""
Configurações da Aplicação - Customer API
=========================================

Gerencia variáveis de ambiente de forma centralizada e tipada.
"""

from pathlib import Path
from dotenv import load_dotenv
from pydantic_settings import BaseSettings

# Carrega .env do diretório raiz
load_dotenv(dotenv_path=Path(__file__).resolve().parent.parent.parent / ".env")


class Config(BaseSettings):
    """Configurações centralizadas da aplicação"""

    # ═══════════════════════════════════════════════════════════
    # 🌍 AMBIENTE
    # ═══════════════════════════════════════════════════════════

    ENVIRONMENT: str = "development"
    DEBUG: bool = False

    # ═══════════════════════════════════════════════════════════
    # 🗄️ BANCO DE DADOS
    # ═══════════════════════════════════════════════════════════

    DATABASE_URL: str = "sqlite:///./customers.db"

    # ═══════════════════════════════════════════════════════════
    # 📄 PAGINAÇÃO
    # ═══════════════════════════════════════════════════════════

    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    # ═══════════════════════════════════════════════════════════
    # 🖥️ SERVIDOR
    # ═══════════════════════════════════════════════════════════

    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"

    # ═══════════════════════════════════════════════════════════
    # 🔧 PROPRIEDADES ÚTEIS
    # ═══════════════════════════════════════════════════════════

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"

    @property
    def is_development(self) -> bool:
        return self.ENVIRONMENT.lower() == "development"

    @property
    def is_test(self) -> bool:
        return self.ENVIRONMENT.lower() == "test"

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


# ✅ Instância global
config = Config()


# ✅ Validação básica no startup
def validate_config():
    """Valida configurações críticas"""
    errors = []

    if config.ENVIRONMENT not in ["development", "test", "production"]:
        errors.append("ENVIRONMENT deve ser: development, test ou production")

    if config.DEFAULT_PAGE_SIZE < 1 or config.DEFAULT_PAGE_SIZE > config.MAX_PAGE_SIZE:
        errors.append("DEFAULT_PAGE_SIZE deve estar entre 1 e MAX_PAGE_SIZE")

    if errors:
        raise ValueError(
            "❌ Erros de configuração:\n" + "\n".join(f"  • {e}" for e in errors)
        )


validate_config()
