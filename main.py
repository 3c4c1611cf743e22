"""
Ponto de entrada - Customer API
===============================
Executa a aplicação com uvicorn.
"""

import logging

import uvicorn

from customer_api.core.config import config

logger = logging.getLogger(__name__)


def main():
    """Função principal para executar o servidor"""

    uvicorn_config = {
        "app": "customer_api.main:app",
        "host": config.HOST,
        "port": config.PORT,
        "reload": config.DEBUG,
        "log_level": "info" if config.DEBUG else "warning",
        "access_log": config.DEBUG,
    }

    logger.info(f"🌐 Servidor iniciando em http://{config.HOST}:{config.PORT}")
    uvicorn.run(**uvicorn_config)


if __name__ == "__main__":
    main()
