"""
Exceções de domínio da Customer API.

Os handlers em customer_api.main traduzem cada uma para uma resposta HTTP.
"""


class CustomerApiError(Exception):
    """Exceção base para erros de domínio"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(CustomerApiError):
    """Registro inexistente ou chave de busca inválida (404)"""
    pass


class DuplicateResourceError(CustomerApiError):
    """Violação de unicidade de customer_code ou email (409)"""
    pass
