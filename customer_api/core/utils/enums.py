import enum
from typing import Optional


class CustomerStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    SUSPENDED = "SUSPENDED"


def parse_customer_status(value: Optional[str]) -> Optional[CustomerStatus]:
    """
    Converte texto livre ("active", "Active"...) para CustomerStatus.

    Retorna None quando o texto está vazio ou não corresponde a nenhuma
    variante. Quem chama decide se isso é erro ou apenas ausência de filtro.
    """
    if value is None or not value.strip():
        return None
    return CustomerStatus.__members__.get(value.upper())
