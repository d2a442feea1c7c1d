"""
Account service for Digiflazz deposit operations.
Handles balance checks and deposit tickets.
"""

import logging
from typing import Dict, Any

from ..constants import APIEndpoints, SIGN_CHECK_BALANCE, SIGN_DEPOSIT
from ..utils.validators import validate_required, validate_bank_name
from .base import BaseService

logger = logging.getLogger(__name__)


class AccountService(BaseService):
    """
    Service for deposit-related operations.
    """
    
    def check_balance(self) -> Dict[str, Any]:
        """
        Retrieve remaining deposit balance.
        
        Returns:
            Dictionary containing:
                - deposit: Current balance
        """
        logger.info("Retrieving deposit balance")
        
        response = self._request(
            APIEndpoints.CHECK_BALANCE,
            {'cmd': 'deposit'},
            SIGN_CHECK_BALANCE
        )
        
        logger.info(f"Deposit balance retrieved: {response.get('deposit')}")
        return response
    
    def request_deposit(self, amount: int, bank: str, owner_name: str) -> Dict[str, Any]:
        """
        Create a deposit ticket.
        The transfer must use the returned amount (with unique code) and notes.
        
        Args:
            amount: Requested deposit amount
            bank: Destination bank (BCA, MANDIRI, BRI or BNI)
            owner_name: Name of the account holder making the transfer
            
        Returns:
            Dictionary containing:
                - rc: Response code
                - amount: Amount to transfer, including unique code
                - notes: Transfer note to include
                
        Raises:
            ValidationError: If a parameter is missing or the bank is unsupported
        """
        payload = {
            'amount': validate_required(amount, 'amount'),
            'Bank': validate_bank_name(bank),
            'owner_name': validate_required(owner_name, 'owner_name'),
        }
        
        logger.info(f"Requesting deposit ticket via {payload['Bank']}")
        return self._request(APIEndpoints.DEPOSIT, payload, SIGN_DEPOSIT)
