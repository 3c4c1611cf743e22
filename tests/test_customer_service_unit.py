"""
Testes unitários do CustomerService
===================================
Store mockado: ordem das validações e chamadas ao store
"""

import pytest
from datetime import datetime, timezone
from unittest.mock import MagicMock

from customer_api.api.crud.base import CustomerStore
from customer_api.api.schemas.customer import CustomerCreateRequest, CustomerPatchRequest
from customer_api.api.services.customer_service import CustomerService
from customer_api.core import models
from customer_api.core.exceptions import DuplicateResourceError, ResourceNotFoundError
from customer_api.core.utils.enums import CustomerStatus, parse_customer_status


# ═══════════════════════════════════════════════════════════
# FIXTURES
# ═══════════════════════════════════════════════════════════

@pytest.fixture
def mock_store():
    """Mock do CustomerStore"""
    store = MagicMock(spec=CustomerStore)
    store.transaction.return_value = MagicMock()
    return store


@pytest.fixture
def service(mock_store):
    return CustomerService(mock_store)


@pytest.fixture
def sample_customer():
    return models.Customer(
        id=1,
        customer_code="C1",
        full_name="Maria Alves",
        email="maria@example.com",
        phone="11988887777",
        address="Rua A, 1",
        status=CustomerStatus.SUSPENDED,
        created_at=datetime(2025, 1, 10, 12, 0, tzinfo=timezone.utc),
    )


# ═══════════════════════════════════════════════════════════
# CONVERSÃO DE STATUS
# ═══════════════════════════════════════════════════════════

class TestParseCustomerStatus:
    """Testes da conversão texto -> CustomerStatus"""

    @pytest.mark.parametrize("text,expected", [
        ("active", CustomerStatus.ACTIVE),
        ("INACTIVE", CustomerStatus.INACTIVE),
        ("Suspended", CustomerStatus.SUSPENDED),
    ])
    def test_known_variants(self, text, expected):
        assert parse_customer_status(text) is expected

    @pytest.mark.parametrize("text", [None, "", "   ", "bogus", "activ"])
    def test_unknown_or_blank(self, text):
        assert parse_customer_status(text) is None


# ═══════════════════════════════════════════════════════════
# CONVERSÃO DE DTO
# ═══════════════════════════════════════════════════════════

class TestConversion:
    """Testes de conversão entre entidade e DTO"""

    def test_to_response_copies_all_fields(self, sample_customer):
        response = CustomerService.to_response(sample_customer)

        assert response.id == 1
        assert response.customer_code == "C1"
        assert response.full_name == "Maria Alves"
        assert response.email == "maria@example.com"
        assert response.phone == "11988887777"
        assert response.address == "Rua A, 1"
        assert response.status == "SUSPENDED"
        assert response.created_at == datetime(2025, 1, 10, 12, 0, tzinfo=timezone.utc)

    def test_to_entity_leaves_store_fields_unset(self):
        entity = CustomerService.to_entity(CustomerCreateRequest(
            customer_code="C2", full_name="João", email="joao@example.com", phone="1", address="Rua B"
        ))

        assert entity.customer_code == "C2"
        assert entity.full_name == "João"
        assert entity.email == "joao@example.com"
        assert entity.id is None
        assert entity.status is None
        assert entity.created_at is None


# ═══════════════════════════════════════════════════════════
# ORDEM DAS VALIDAÇÕES
# ═══════════════════════════════════════════════════════════

class TestValidationOrder:
    """Testes de sequência de checagens"""

    def test_duplicate_code_stops_before_email_check(self, service, mock_store):
        mock_store.exists_by_customer_code.return_value = True

        with pytest.raises(DuplicateResourceError):
            service.create_customer(CustomerCreateRequest(
                customer_code="C1", full_name="X", email="x@example.com"
            ))

        mock_store.exists_by_email.assert_not_called()
        mock_store.save.assert_not_called()

    def test_duplicate_email_is_not_saved(self, service, mock_store):
        mock_store.exists_by_customer_code.return_value = False
        mock_store.exists_by_email.return_value = True

        with pytest.raises(DuplicateResourceError, match="Email already exists"):
            service.create_customer(CustomerCreateRequest(
                customer_code="C1", full_name="X", email="x@example.com"
            ))

        mock_store.save.assert_not_called()

    def test_create_runs_inside_transaction(self, service, mock_store, sample_customer):
        mock_store.exists_by_customer_code.return_value = False
        mock_store.exists_by_email.return_value = False
        mock_store.save.return_value = sample_customer

        service.create_customer(CustomerCreateRequest(
            customer_code="C1", full_name="Maria Alves", email="maria@example.com"
        ))

        mock_store.transaction.assert_called_once()
        mock_store.transaction.return_value.__enter__.assert_called_once()
        mock_store.transaction.return_value.__exit__.assert_called_once()

    def test_patch_same_email_skips_duplicate_check(self, service, mock_store, sample_customer):
        mock_store.find_by_id.return_value = sample_customer
        mock_store.save.side_effect = lambda c: c

        response = service.partial_update_customer(1, CustomerPatchRequest(email="maria@example.com"))

        mock_store.exists_by_email.assert_not_called()
        assert response.email == "maria@example.com"

    def test_patch_applies_name_before_email_check(self, service, mock_store, sample_customer):
        mock_store.find_by_id.return_value = sample_customer
        mock_store.exists_by_email.return_value = True

        with pytest.raises(DuplicateResourceError):
            service.partial_update_customer(1, CustomerPatchRequest(full_name="Novo", email="outro@example.com"))

        # A transação desfaz isso; aqui só conferimos a ordem de aplicação
        assert sample_customer.full_name == "Novo"
        assert sample_customer.email == "maria@example.com"
        mock_store.save.assert_not_called()

    def test_delete_missing_does_not_delete(self, service, mock_store):
        mock_store.exists_by_id.return_value = False

        with pytest.raises(ResourceNotFoundError):
            service.delete_customer(5)

        mock_store.delete_by_id.assert_not_called()

    def test_invalid_status_does_not_touch_store(self, service, mock_store):
        with pytest.raises(ResourceNotFoundError, match="Invalid status: happy"):
            service.get_customers_by_status("happy")

        mock_store.find_by_status.assert_not_called()

    def test_advanced_search_drops_invalid_status(self, service, mock_store):
        mock_store.advanced_search.return_value = []

        service.advanced_search(name="ana", email=None, status="happy")

        mock_store.advanced_search.assert_called_once_with("ana", None, None)

    def test_list_sort_direction(self, service, mock_store):
        mock_store.find_all.return_value = ([], 0)

        service.list_customers(0, 10, "email", "DESC")
        mock_store.find_all.assert_called_with(0, 10, "email", False)

        service.list_customers(0, 10, "email", "aSc")
        mock_store.find_all.assert_called_with(0, 10, "email", True)
