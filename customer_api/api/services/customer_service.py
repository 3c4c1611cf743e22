# customer_api/api/services/customer_service.py
import logging
from typing import List, Optional

from customer_api.api.crud.base import CustomerStore
from customer_api.api.schemas.customer import (
    CustomerCreateRequest,
    CustomerPatchRequest,
    CustomerResponse,
    CustomerUpdateRequest,
)
from customer_api.api.schemas.shared.pagination import PaginatedResponse
from customer_api.core import models
from customer_api.core.exceptions import DuplicateResourceError, ResourceNotFoundError
from customer_api.core.utils.enums import parse_customer_status

logger = logging.getLogger(__name__)


class CustomerService:
    """
    Service para o ciclo de vida dos clientes.

    Cada operação pública roda dentro de store.transaction(): commit no
    retorno normal, rollback em qualquer exceção.
    """

    def __init__(self, store: CustomerStore):
        self.store = store

    # ========== LEITURA ==========

    def list_customers(
            self,
            page: int,
            size: int,
            sort_by: str,
            sort_dir: str,
    ) -> PaginatedResponse[CustomerResponse]:
        """Lista paginada; sort_dir "asc" (qualquer caixa) ordena crescente, o resto decrescente"""
        ascending = sort_dir.lower() == "asc"

        with self.store.transaction():
            customers, total = self.store.find_all(page, size, sort_by, ascending)
            items = [self.to_response(c) for c in customers]

        return PaginatedResponse[CustomerResponse].build(
            items=items, total_items=total, page=page, size=size
        )

    def get_customer(self, customer_id: int) -> CustomerResponse:
        with self.store.transaction():
            customer = self._get_or_raise(customer_id)
            return self.to_response(customer)

    def search_customers(self, keyword: str) -> List[CustomerResponse]:
        with self.store.transaction():
            return [self.to_response(c) for c in self.store.search_customers(keyword)]

    def get_customers_by_status(self, status: str) -> List[CustomerResponse]:
        status_enum = parse_customer_status(status)
        if status_enum is None:
            # Status inválido é reportado como "não encontrado"
            raise ResourceNotFoundError(f"Invalid status: {status}")

        with self.store.transaction():
            return [self.to_response(c) for c in self.store.find_by_status(status_enum)]

    def advanced_search(
            self,
            name: Optional[str] = None,
            email: Optional[str] = None,
            status: Optional[str] = None,
    ) -> List[CustomerResponse]:
        # Ao contrário de get_customers_by_status, status inválido apenas
        # remove o filtro
        status_enum = parse_customer_status(status)
        if status is not None and status.strip() and status_enum is None:
            logger.info(f"Status '{status}' ignorado na busca avançada")

        with self.store.transaction():
            customers = self.store.advanced_search(name, email, status_enum)
            return [self.to_response(c) for c in customers]

    # ========== ESCRITA ==========

    def create_customer(self, request: CustomerCreateRequest) -> CustomerResponse:
        with self.store.transaction():
            if self.store.exists_by_customer_code(request.customer_code):
                logger.warning(f"⚠️ Código de cliente duplicado: {request.customer_code}")
                raise DuplicateResourceError(f"Customer code already exists: {request.customer_code}")

            if self.store.exists_by_email(request.email):
                logger.warning(f"⚠️ Email de cliente duplicado: {request.email}")
                raise DuplicateResourceError(f"Email already exists: {request.email}")

            customer = self.store.save(self.to_entity(request))
            logger.info(f"✅ Cliente criado: id={customer.id} code={customer.customer_code}")
            return self.to_response(customer)

    def update_customer(self, customer_id: int, request: CustomerUpdateRequest) -> CustomerResponse:
        with self.store.transaction():
            customer = self._get_or_raise(customer_id)
            self._check_email_change(customer, request.email)

            customer.full_name = request.full_name
            customer.email = request.email
            customer.phone = request.phone
            customer.address = request.address
            # customer_code é imutável

            customer = self.store.save(customer)
            logger.info(f"✅ Cliente atualizado: id={customer.id}")
            return self.to_response(customer)

    def partial_update_customer(self, customer_id: int, request: CustomerPatchRequest) -> CustomerResponse:
        """
        Aplica só os campos presentes, na ordem full_name, email, phone, address.

        Se o email for duplicado a exceção desfaz a transação inteira,
        inclusive o full_name já aplicado no objeto.
        """
        with self.store.transaction():
            customer = self._get_or_raise(customer_id)

            if request.full_name is not None:
                customer.full_name = request.full_name

            if request.email is not None:
                self._check_email_change(customer, request.email)
                customer.email = request.email

            if request.phone is not None:
                customer.phone = request.phone

            if request.address is not None:
                customer.address = request.address

            customer = self.store.save(customer)
            logger.info(f"✅ Cliente atualizado parcialmente: id={customer.id}")
            return self.to_response(customer)

    def delete_customer(self, customer_id: int) -> None:
        with self.store.transaction():
            if not self.store.exists_by_id(customer_id):
                raise ResourceNotFoundError(f"Customer not found with id: {customer_id}")
            self.store.delete_by_id(customer_id)
            logger.info(f"🗑️ Cliente removido: id={customer_id}")

    # ========== HELPERS ==========

    def _get_or_raise(self, customer_id: int) -> models.Customer:
        customer = self.store.find_by_id(customer_id)
        if customer is None:
            raise ResourceNotFoundError(f"Customer not found with id: {customer_id}")
        return customer

    def _check_email_change(self, customer: models.Customer, new_email: str) -> None:
        """Só consulta duplicidade quando o email realmente muda"""
        if customer.email != new_email and self.store.exists_by_email(new_email):
            logger.warning(f"⚠️ Email de cliente duplicado: {new_email}")
            raise DuplicateResourceError(f"Email already exists: {new_email}")

    @staticmethod
    def to_response(customer: models.Customer) -> CustomerResponse:
        return CustomerResponse(
            id=customer.id,
            customer_code=customer.customer_code,
            full_name=customer.full_name,
            email=customer.email,
            phone=customer.phone,
            address=customer.address,
            status=customer.status.name,
            created_at=customer.created_at,
        )

    @staticmethod
    def to_entity(request: CustomerCreateRequest) -> models.Customer:
        # id, status e created_at ficam por conta do banco
        return models.Customer(
            customer_code=request.customer_code,
            full_name=request.full_name,
            email=request.email,
            phone=request.phone,
            address=request.address,
        )
