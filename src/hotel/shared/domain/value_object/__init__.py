from .currency import Currency
from .customer_id import CustomerId
from .money import Money

__all__ = ["Currency", "CustomerId", "Money"]
