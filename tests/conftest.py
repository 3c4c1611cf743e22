"""
Fixtures compartilhadas
=======================
Banco SQLite em memória isolado por teste.
"""

import os

# Precisa vir antes de qualquer import de customer_api
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from customer_api.api.crud.crud_customer import SqlAlchemyCustomerStore
from customer_api.api.services.customer_service import CustomerService
from customer_api.core import models
from customer_api.core.utils.enums import CustomerStatus


# ═══════════════════════════════════════════════════════════
# BANCO
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def test_engine():
    """Engine em memória, uma conexão compartilhada entre threads"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    models.Base.metadata.create_all(engine)
    yield engine
    models.Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(test_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=test_engine, expire_on_commit=False)


@pytest.fixture
def test_db(session_factory):
    """Sessão de teste"""
    db = session_factory()
    yield db
    db.close()


@pytest.fixture
def customer_service(test_db):
    """CustomerService sobre o banco de teste"""
    return CustomerService(SqlAlchemyCustomerStore(test_db))


# ═══════════════════════════════════════════════════════════
# DADOS
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def sample_customers(test_db):
    """Três clientes, um de cada status"""
    customers = [
        models.Customer(
            customer_code="C001",
            full_name="Ana Souza",
            email="ana@example.com",
            phone="11999990001",
            address="Rua A, 1",
            status=CustomerStatus.ACTIVE,
        ),
        models.Customer(
            customer_code="C002",
            full_name="Bruno Lima",
            email="bruno@example.com",
            phone="11999990002",
            address="Rua B, 2",
            status=CustomerStatus.INACTIVE,
        ),
        models.Customer(
            customer_code="C003",
            full_name="Carla Dias",
            email="carla@example.com",
            status=CustomerStatus.ACTIVE,
        ),
    ]
    test_db.add_all(customers)
    test_db.commit()
    return customers
