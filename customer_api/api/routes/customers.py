from typing import List, Optional

from fastapi import APIRouter, Query, Path

from customer_api.api.schemas.customer import (
    CustomerCreateRequest,
    CustomerPatchRequest,
    CustomerResponse,
    CustomerUpdateRequest,
)
from customer_api.api.schemas.shared.pagination import PaginatedResponse
from customer_api.core.config import config
from customer_api.core.dependencies import GetCustomerServiceDep

router = APIRouter(prefix="/api/customers", tags=["Customers"])


# ===================================================================
# LEITURA
# ===================================================================

@router.get("", response_model=PaginatedResponse[CustomerResponse])
def list_customers(
        service: GetCustomerServiceDep,
        page: int = Query(0, ge=0, description="Índice da página (começa em 0)"),
        size: int = Query(config.DEFAULT_PAGE_SIZE, ge=1, le=config.MAX_PAGE_SIZE),
        sort_by: str = Query("id", description="Atributo usado na ordenação"),
        sort_dir: str = Query("asc", description="asc ou desc"),
):
    return service.list_customers(page, size, sort_by, sort_dir)


# As rotas fixas vêm antes de /{customer_id}
@router.get("/search", response_model=List[CustomerResponse])
def search_customers(
        service: GetCustomerServiceDep,
        keyword: str = Query(..., description="Busca em nome, email e código"),
):
    return service.search_customers(keyword)


@router.get("/status/{status}", response_model=List[CustomerResponse])
def get_customers_by_status(status: str, service: GetCustomerServiceDep):
    return service.get_customers_by_status(status)


@router.get("/advanced-search", response_model=List[CustomerResponse])
def advanced_search(
        service: GetCustomerServiceDep,
        name: Optional[str] = Query(None),
        email: Optional[str] = Query(None),
        status: Optional[str] = Query(None, description="Status inválido é ignorado"),
):
    return service.advanced_search(name=name, email=email, status=status)


@router.get("/{customer_id}", response_model=CustomerResponse)
def get_customer(
        service: GetCustomerServiceDep,
        customer_id: int = Path(..., description="ID do cliente"),
):
    return service.get_customer(customer_id)


# ===================================================================
# ESCRITA
# ===================================================================

@router.post("", response_model=CustomerResponse, status_code=201)
def create_customer(payload: CustomerCreateRequest, service: GetCustomerServiceDep):
    return service.create_customer(payload)


@router.put("/{customer_id}", response_model=CustomerResponse)
def update_customer(customer_id: int, payload: CustomerUpdateRequest, service: GetCustomerServiceDep):
    return service.update_customer(customer_id, payload)


@router.patch("/{customer_id}", response_model=CustomerResponse)
def partial_update_customer(customer_id: int, payload: CustomerPatchRequest, service: GetCustomerServiceDep):
    return service.partial_update_customer(customer_id, payload)


@router.delete("/{customer_id}", status_code=204)
def delete_customer(customer_id: int, service: GetCustomerServiceDep):
    service.delete_customer(customer_id)
    return
