import math

from pydantic import BaseModel
from typing import List, Generic, TypeVar

T = TypeVar('T')


class PaginatedResponse(BaseModel, Generic[T]):
    items: List[T]
    total_items: int
    total_pages: int
    page: int
    size: int

    @classmethod
    def build(cls, items: List[T], total_items: int, page: int, size: int) -> "PaginatedResponse[T]":
        """Monta a página calculando total_pages a partir do total"""
        return cls(
            items=items,
            total_items=total_items,
            total_pages=math.ceil(total_items / size) if size > 0 else 0,
            page=page,
            size=size,
        )
