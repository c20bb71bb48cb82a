from .exceptions import DomainException, InvalidOperationException

__all__ = ["DomainException", "InvalidOperationException"]
