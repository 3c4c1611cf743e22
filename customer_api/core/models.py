from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, Enum, String, UniqueConstraint
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from customer_api.core.utils.enums import CustomerStatus


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    # `default` usa uma função Python, não do banco: hora atual em UTC
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        index=True
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc)
    )


class Customer(Base, TimestampMixin):
    __tablename__ = "customers"

    id: Mapped[int] = mapped_column(primary_key=True)

    # --- Identificação ---
    # customer_code nunca muda depois da criação
    customer_code: Mapped[str] = mapped_column(String(20), index=True)
    full_name: Mapped[str] = mapped_column(String(100))

    # --- Contato ---
    email: Mapped[str] = mapped_column(String(100), index=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    address: Mapped[str | None] = mapped_column(String(255), nullable=True)

    status: Mapped[CustomerStatus] = mapped_column(
        Enum(CustomerStatus, native_enum=False, length=20),
        default=CustomerStatus.ACTIVE,
        nullable=False
    )

    __table_args__ = (
        UniqueConstraint("customer_code", name="uq_customers_customer_code"),
        UniqueConstraint("email", name="uq_customers_email"),
    )

    def __repr__(self) -> str:
        return f"<Customer id={self.id} code={self.customer_code!r}>"
