from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from customer_api.api.schemas.base_schema import AppBaseModel


class CustomerCreateRequest(AppBaseModel):
    customer_code: str = Field(..., min_length=1, max_length=20)
    full_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = Field(None, max_length=255)


class CustomerUpdateRequest(AppBaseModel):
    """Atualização completa: todos os campos mutáveis são sobrescritos"""
    full_name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = Field(None, max_length=255)


class CustomerPatchRequest(AppBaseModel):
    """Atualização parcial: campos ausentes (ou null) ficam intocados"""
    full_name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None
    phone: Optional[str] = Field(None, max_length=20)
    address: Optional[str] = Field(None, max_length=255)


class CustomerResponse(BaseModel):
    id: int
    customer_code: str
    full_name: str
    email: str
    phone: Optional[str] = None
    address: Optional[str] = None
    status: str
    created_at: Optional[datetime] = None
