"""
Shared plumbing for Digiflazz API services.
Every signed request goes through BaseService._request.
"""

import logging
from typing import Any, Dict, Optional

from ..config import config
from ..constants import ResponseCode, TransactionStatus
from ..exceptions import APIError, ConfigurationError, TransportError
from ..utils.http_client import HTTPClient
from ..utils.signature import generate_sign

logger = logging.getLogger(__name__)


class BaseService:
    """
    Base class for services calling signed Digiflazz endpoints.
    
    Credentials default to the Django settings. Pass an HTTPClient to share
    one session between several services.
    """
    
    def __init__(
        self,
        username: Optional[str] = None,
        api_key: Optional[str] = None,
        http_client: Optional[HTTPClient] = None
    ):
        self.username = username or config.username
        self.api_key = api_key or config.api_key
        if not self.username or not self.api_key:
            raise ConfigurationError("Username and API key are required.")
        self.http_client = http_client or HTTPClient(config.api_base_url, timeout=config.timeout)
    
    def _request(self, endpoint: str, body: Dict[str, Any], sign_identifier: str) -> Any:
        """
        Sign and send a request, then unwrap the `data` envelope.
        
        Args:
            endpoint: API endpoint path, e.g. '/cek-saldo'
            body: Endpoint-specific request body
            sign_identifier: Value appended to the credentials when signing
            
        Returns:
            Contents of the response's `data` field
            
        Raises:
            APIError: If the gateway returns a response code other than '00'
            TransportError: On network or HTTP failure
        """
        request_body = {
            **body,
            'username': self.username,
            'sign': generate_sign(self.username, self.api_key, sign_identifier),
        }
        
        response = self.http_client.post(endpoint=endpoint, data=request_body)
        
        if not isinstance(response, dict) or response.get('data') is None:
            raise TransportError(
                f"Unexpected response from {endpoint}: missing data envelope",
                response_data=response
            )
        
        data = response['data']
        if isinstance(data, dict):
            rc = data.get('rc')
            if rc and rc != ResponseCode.SUCCESS.value:
                message = data.get('message') or 'Digiflazz API returned an error'
                logger.warning(f"Digiflazz API error on {endpoint}: rc={rc} message={message}")
                raise APIError(
                    message,
                    rc=rc,
                    status=data.get('status', TransactionStatus.FAILED.value),
                    response_data=data
                )
        
        return data
