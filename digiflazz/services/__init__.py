"""
Service modules for Digiflazz API operations.
"""

from .base import BaseService
from .account_service import AccountService
from .product_service import ProductService
from .transaction_service import TransactionService
from .webhook_service import WebhookService

__all__ = [
    'BaseService',
    'AccountService',
    'ProductService',
    'TransactionService',
    'WebhookService',
]
