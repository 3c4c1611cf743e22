from typing import Annotated

from fastapi import Depends

from customer_api.api.crud.crud_customer import SqlAlchemyCustomerStore
from customer_api.api.services.customer_service import CustomerService
from customer_api.core.database import GetDBDep


def get_customer_service(db: GetDBDep) -> CustomerService:
    """Um service por requisição, ligado à sessão da requisição"""
    return CustomerService(SqlAlchemyCustomerStore(db))


GetCustomerServiceDep = Annotated[CustomerService, Depends(get_customer_service)]
