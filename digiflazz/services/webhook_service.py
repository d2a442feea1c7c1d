"""
Webhook service for Digiflazz webhook management.
"""

import logging
from typing import Dict, Any

from ..constants import APIEndpoints
from ..utils.validators import validate_required
from .base import BaseService

logger = logging.getLogger(__name__)


class WebhookService(BaseService):
    
    def trigger_ping(self, hook_id: str) -> Dict[str, Any]:
        """
        Ask Digiflazz to send a 'ping' event to a registered webhook.
        The ping endpoint is not signed and its response is not wrapped in `data`.
        
        Args:
            hook_id: Webhook ID from the Digiflazz dashboard
            
        Returns:
            Ping payload: sed, hook_id, hook
        """
        hook_id = validate_required(hook_id, 'hook_id')
        logger.info(f"Triggering ping for webhook: {hook_id}")
        return self.http_client.post(
            endpoint=APIEndpoints.TRIGGER_PING.format(hook_id=hook_id)
        )
