"""
Validation utilities for Digiflazz request parameters.
"""

from typing import Any

from ..constants import BankName
from ..exceptions import ValidationError


def validate_required(value: Any, field_name: str) -> Any:
    """
    Check that a required parameter is present.
    
    Args:
        value: Parameter value
        field_name: Name used in the error message
        
    Returns:
        The value, with surrounding whitespace stripped for strings
        
    Raises:
        ValidationError: If the value is missing or blank
    """
    if isinstance(value, str):
        value = value.strip()
    if value is None or value == '':
        raise ValidationError(f'Parameter "{field_name}" is required')
    return value


def validate_bank_name(bank: str) -> str:
    """
    Validate deposit bank name.
    
    Args:
        bank: Bank name, any case
        
    Returns:
        Upper-cased bank name
        
    Raises:
        ValidationError: If bank is not supported
    """
    bank = validate_required(bank, 'bank').upper()
    
    valid_banks = [b.value for b in BankName]
    if bank not in valid_banks:
        raise ValidationError(
            f"Invalid bank: {bank}. "
            f"Supported banks: {', '.join(valid_banks)}"
        )
    
    return bank
