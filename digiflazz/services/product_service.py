"""
Product service for Digiflazz price lists.
"""

import logging
from typing import Any, Dict, List, Optional

from ..constants import APIEndpoints, PriceListType, SIGN_PRICE_LIST
from .base import BaseService

logger = logging.getLogger(__name__)


class ProductService(BaseService):
    
    def price_list(
        self,
        cmd: str = PriceListType.PREPAID.value,
        code: Optional[str] = None,
        category: Optional[str] = None,
        brand: Optional[str] = None,
        type: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        """
        Get the product price list, optionally filtered.
        
        Args:
            cmd: 'prepaid' or 'pasca'
            code: Buyer SKU code
            category: Product category
            brand: Product brand
            type: Product type
            
        Returns:
            List of products
        """
        filters = {
            'cmd': cmd,
            'code': code,
            'category': category,
            'brand': brand,
            'type': type,
        }
        payload = {key: value for key, value in filters.items() if value is not None}
        
        logger.info(f"Retrieving {cmd} price list")
        return self._request(APIEndpoints.PRICE_LIST, payload, SIGN_PRICE_LIST)
