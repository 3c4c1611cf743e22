"""
Contrato de persistência de clientes.

O CustomerService só conhece esta interface; a implementação concreta
(SQLAlchemy) fica em crud_customer.py.
"""
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import List, Optional, Tuple

from customer_api.core.models import Customer
from customer_api.core.utils.enums import CustomerStatus


class CustomerStore(ABC):
    """Interface de acesso aos clientes persistidos"""

    @abstractmethod
    def transaction(self) -> AbstractContextManager:
        """Unidade de trabalho: commit ao sair normalmente, rollback em erro"""
        pass

    @abstractmethod
    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        pass

    @abstractmethod
    def exists_by_id(self, customer_id: int) -> bool:
        pass

    @abstractmethod
    def exists_by_customer_code(self, customer_code: str) -> bool:
        pass

    @abstractmethod
    def exists_by_email(self, email: str) -> bool:
        pass

    @abstractmethod
    def find_all(self, page: int, size: int, sort_by: str, ascending: bool) -> Tuple[List[Customer], int]:
        """
        Lista uma página de clientes ordenada.

        Args:
            page: índice da página, começando em 0
            size: itens por página
            sort_by: nome do atributo usado na ordenação
            ascending: True para ordem crescente

        Returns:
            (itens da página, total de clientes)
        """
        pass

    @abstractmethod
    def find_by_status(self, status: CustomerStatus) -> List[Customer]:
        pass

    @abstractmethod
    def search_customers(self, keyword: str) -> List[Customer]:
        """Busca textual em nome, email e código"""
        pass

    @abstractmethod
    def advanced_search(
            self,
            name: Optional[str],
            email: Optional[str],
            status: Optional[CustomerStatus],
    ) -> List[Customer]:
        """Filtros combinados com AND; filtros None são ignorados"""
        pass

    @abstractmethod
    def save(self, customer: Customer) -> Customer:
        """Insere ou atualiza conforme a identidade do objeto"""
        pass

    @abstractmethod
    def delete_by_id(self, customer_id: int) -> None:
        pass
