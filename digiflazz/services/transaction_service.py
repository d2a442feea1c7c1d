"""
Transaction service for Digiflazz prepaid and postpaid products.
Handles top up, postpaid inquiry/payment, status checks and PLN inquiry.
"""

import logging
from typing import Dict, Any, Optional

from ..constants import APIEndpoints, TransactionCommand
from ..utils.validators import validate_required
from .base import BaseService

logger = logging.getLogger(__name__)


class TransactionService(BaseService):
    """
    Service for transaction operations.
    All transactions are signed with their ref_id.
    """
    
    def _build_transaction(
        self,
        buyer_sku_code: str,
        customer_no: str,
        ref_id: str,
        testing: Optional[bool] = None,
        max_price: Optional[int] = None,
        cb_url: Optional[str] = None,
        allow_dot: Optional[bool] = None,
        commands: Optional[TransactionCommand] = None
    ) -> Dict[str, Any]:
        payload = {
            'buyer_sku_code': validate_required(buyer_sku_code, 'buyer_sku_code'),
            'customer_no': validate_required(customer_no, 'customer_no'),
            'ref_id': validate_required(ref_id, 'ref_id'),
        }
        optional = {
            'testing': testing,
            'max_price': max_price,
            'cb_url': cb_url,
            'allow_dot': allow_dot,
        }
        payload.update({key: value for key, value in optional.items() if value is not None})
        if commands is not None:
            payload['commands'] = commands.value
        return payload
    
    def top_up(
        self,
        buyer_sku_code: str,
        customer_no: str,
        ref_id: str,
        testing: Optional[bool] = None,
        max_price: Optional[int] = None,
        cb_url: Optional[str] = None,
        allow_dot: Optional[bool] = None
    ) -> Dict[str, Any]:
        """
        Purchase a prepaid product.
        
        Args:
            buyer_sku_code: Product SKU code
            customer_no: Destination number
            ref_id: Unique transaction reference
            testing: Use the gateway's testing mode
            max_price: Reject if the price is above this value
            cb_url: Per-transaction callback URL
            allow_dot: Allow dots in customer_no
            
        Returns:
            Dictionary containing ref_id, status, rc, message, sn, price, ...
            
        Raises:
            ValidationError: If a required parameter is missing
            APIError: If the transaction is rejected or still pending
        """
        logger.info(f"Top up {buyer_sku_code} for ref_id: {ref_id}")
        payload = self._build_transaction(
            buyer_sku_code, customer_no, ref_id,
            testing=testing, max_price=max_price, cb_url=cb_url, allow_dot=allow_dot
        )
        return self._request(APIEndpoints.TRANSACTION, payload, payload['ref_id'])
    
    def inquiry_postpaid(
        self,
        buyer_sku_code: str,
        customer_no: str,
        ref_id: str,
        testing: Optional[bool] = None
    ) -> Dict[str, Any]:
        """
        Inquire a postpaid bill.
        
        Returns:
            Dictionary containing the bill: customer_name, admin,
            selling_price, desc, ...
        """
        logger.info(f"Postpaid inquiry {buyer_sku_code} for ref_id: {ref_id}")
        payload = self._build_transaction(
            buyer_sku_code, customer_no, ref_id,
            testing=testing, commands=TransactionCommand.INQUIRY
        )
        return self._request(APIEndpoints.TRANSACTION, payload, payload['ref_id'])
    
    def pay_postpaid(
        self,
        buyer_sku_code: str,
        customer_no: str,
        ref_id: str,
        testing: Optional[bool] = None
    ) -> Dict[str, Any]:
        """
        Pay a postpaid bill.
        Use the same ref_id as the preceding inquiry.
        """
        logger.info(f"Postpaid payment {buyer_sku_code} for ref_id: {ref_id}")
        payload = self._build_transaction(
            buyer_sku_code, customer_no, ref_id,
            testing=testing, commands=TransactionCommand.PAY
        )
        return self._request(APIEndpoints.TRANSACTION, payload, payload['ref_id'])
    
    def check_status(self, buyer_sku_code: str, customer_no: str, ref_id: str) -> Dict[str, Any]:
        """Check the status of an existing transaction."""
        logger.info(f"Checking transaction status for ref_id: {ref_id}")
        payload = self._build_transaction(
            buyer_sku_code, customer_no, ref_id,
            commands=TransactionCommand.STATUS
        )
        return self._request(APIEndpoints.TRANSACTION, payload, payload['ref_id'])
    
    def inquiry_pln(self, customer_no: str) -> Dict[str, Any]:
        """
        Validate a PLN customer number.
        This endpoint signs with the customer number instead of a ref_id.
        
        Args:
            customer_no: PLN customer ID
            
        Returns:
            Dictionary containing customer_no, meter_no, subscriber_id,
            name, segment_power
        """
        customer_no = validate_required(customer_no, 'customer_no')
        logger.info("Inquiring PLN customer number")
        return self._request(
            APIEndpoints.INQUIRY_PLN,
            {'customer_no': customer_no},
            customer_no
        )
