"""
High-level client for the Digiflazz buyer API.
"""

import logging
from typing import Any, Dict, List, Optional

from .config import config
from .services import AccountService, ProductService, TransactionService, WebhookService
from .utils.http_client import HTTPClient

logger = logging.getLogger(__name__)


class DigiflazzClient:
    """
    Single entry point for the Digiflazz API.
    
    Credentials and connection settings not passed explicitly are read from
    Django settings. All services share one HTTP session.
    
    Usage:
        client = DigiflazzClient()
        balance = client.check_balance()['deposit']
    """
    
    def __init__(
        self,
        username: Optional[str] = None,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None
    ):
        self.http_client = HTTPClient(
            base_url or config.api_base_url,
            timeout=timeout or config.timeout
        )
        credentials = {
            'username': username,
            'api_key': api_key,
            'http_client': self.http_client,
        }
        self.account = AccountService(**credentials)
        self.products = ProductService(**credentials)
        self.transactions = TransactionService(**credentials)
        self.webhooks = WebhookService(**credentials)
    
    def check_balance(self) -> Dict[str, Any]:
        return self.account.check_balance()
    
    def request_deposit(self, amount: int, bank: str, owner_name: str) -> Dict[str, Any]:
        return self.account.request_deposit(amount, bank, owner_name)
    
    def price_list(self, **filters) -> List[Dict[str, Any]]:
        return self.products.price_list(**filters)
    
    def top_up(self, buyer_sku_code: str, customer_no: str, ref_id: str, **options) -> Dict[str, Any]:
        return self.transactions.top_up(buyer_sku_code, customer_no, ref_id, **options)
    
    def inquiry_postpaid(self, buyer_sku_code: str, customer_no: str, ref_id: str, **options) -> Dict[str, Any]:
        return self.transactions.inquiry_postpaid(buyer_sku_code, customer_no, ref_id, **options)
    
    def pay_postpaid(self, buyer_sku_code: str, customer_no: str, ref_id: str, **options) -> Dict[str, Any]:
        return self.transactions.pay_postpaid(buyer_sku_code, customer_no, ref_id, **options)
    
    def check_status(self, buyer_sku_code: str, customer_no: str, ref_id: str) -> Dict[str, Any]:
        return self.transactions.check_status(buyer_sku_code, customer_no, ref_id)
    
    def inquiry_pln(self, customer_no: str) -> Dict[str, Any]:
        return self.transactions.inquiry_pln(customer_no)
    
    def trigger_ping(self, hook_id: str) -> Dict[str, Any]:
        return self.webhooks.trigger_ping(hook_id)
    
    def close(self):
        """Close the underlying HTTP session."""
        self.http_client.close()
