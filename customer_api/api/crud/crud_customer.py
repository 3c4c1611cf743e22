import logging
from contextlib import contextmanager
from typing import List, Optional, Tuple

from sqlalchemy import and_, asc, desc, or_
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from customer_api.api.crud.base import CustomerStore
from customer_api.core import models
from customer_api.core.exceptions import DuplicateResourceError
from customer_api.core.utils.enums import CustomerStatus

logger = logging.getLogger(__name__)


class SqlAlchemyCustomerStore(CustomerStore):
    """CustomerStore sobre uma Session do SQLAlchemy"""

    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def transaction(self):
        try:
            yield
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise

    # ========== LEITURA ==========

    def find_by_id(self, customer_id: int) -> models.Customer | None:
        return self.db.get(models.Customer, customer_id)

    def exists_by_id(self, customer_id: int) -> bool:
        return self.db.query(models.Customer.id).filter(
            models.Customer.id == customer_id
        ).first() is not None

    def exists_by_customer_code(self, customer_code: str) -> bool:
        return self.db.query(models.Customer.id).filter(
            models.Customer.customer_code == customer_code
        ).first() is not None

    def exists_by_email(self, email: str) -> bool:
        return self.db.query(models.Customer.id).filter(
            models.Customer.email == email
        ).first() is not None

    def find_all(self, page: int, size: int, sort_by: str, ascending: bool) -> Tuple[List[models.Customer], int]:
        # Campo de ordenação inexistente vira erro de validação (400)
        if sort_by not in models.Customer.__table__.columns.keys():
            raise ValueError(f"Invalid sort field: {sort_by}")

        column = getattr(models.Customer, sort_by)
        query = self.db.query(models.Customer)

        # Conta o total antes de paginar
        total = query.count()

        items = (
            query.order_by(asc(column) if ascending else desc(column))
            .offset(page * size)
            .limit(size)
            .all()
        )
        return items, total

    def find_by_status(self, status: CustomerStatus) -> List[models.Customer]:
        return self.db.query(models.Customer).filter(
            models.Customer.status == status
        ).order_by(models.Customer.id).all()

    def search_customers(self, keyword: str) -> List[models.Customer]:
        search_pattern = f"%{keyword}%"
        return self.db.query(models.Customer).filter(
            or_(
                models.Customer.full_name.ilike(search_pattern),
                models.Customer.email.ilike(search_pattern),
                models.Customer.customer_code.ilike(search_pattern),
            )
        ).order_by(models.Customer.id).all()

    def advanced_search(
            self,
            name: Optional[str],
            email: Optional[str],
            status: Optional[CustomerStatus],
    ) -> List[models.Customer]:
        filters = []
        if name:
            filters.append(models.Customer.full_name.ilike(f"%{name}%"))
        if email:
            filters.append(models.Customer.email.ilike(f"%{email}%"))
        if status is not None:
            filters.append(models.Customer.status == status)

        query = self.db.query(models.Customer)
        if filters:
            query = query.filter(and_(*filters))
        return query.order_by(models.Customer.id).all()

    # ========== ESCRITA ==========

    def save(self, customer: models.Customer) -> models.Customer:
        self.db.add(customer)
        try:
            self.db.flush()
        except IntegrityError as e:
            # Corrida entre duas requisições: a constraint do banco é a garantia final
            logger.warning(f"⚠️ Violação de unicidade ao salvar cliente: {e.orig}")
            raise DuplicateResourceError(
                f"Customer code or email already exists: {customer.customer_code} / {customer.email}"
            ) from e
        self.db.refresh(customer)
        return customer

    def delete_by_id(self, customer_id: int) -> None:
        customer = self.db.get(models.Customer, customer_id)
        if customer is not None:
            self.db.delete(customer)
            self.db.flush()
