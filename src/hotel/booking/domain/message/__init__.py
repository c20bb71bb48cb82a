from .message_catalog import MessageCatalog

__all__ = ["MessageCatalog"]
