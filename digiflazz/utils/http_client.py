"""
HTTP client for Digiflazz API communication.
"""

import requests
import logging
from typing import Dict, Any, Optional
from digiflazz.exceptions import TransportError
from digiflazz.constants import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)

SENSITIVE_FIELDS = ('username', 'sign', 'secret')


class HTTPClient:
    """
    HTTP client wrapper for Digiflazz API requests.
    Handles request/response, transport errors, and logging.
    """
    
    def __init__(self, base_url: str, timeout: int = DEFAULT_TIMEOUT):
        """
        Initialize HTTP client.
        
        Args:
            base_url: Base URL for API requests
            timeout: Request timeout in seconds
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = requests.Session()
    
    def _get_full_url(self, endpoint: str) -> str:
        """Get full URL for endpoint."""
        endpoint = endpoint.lstrip('/')
        return f"{self.base_url}/{endpoint}"
    
    def _log_request(self, method: str, url: str, data: Optional[Dict] = None):
        """Log API request details."""
        logger.info(f"Digiflazz API Request: {method} {url}")
        if data:
            logger.debug(f"Payload: {self._sanitize_payload(data)}")
    
    def _log_response(self, response: requests.Response, body: Any = None):
        """Log API response details."""
        logger.info(f"Digiflazz API Response: {response.status_code}")
        if isinstance(body, dict):
            logger.debug(f"Response: {self._sanitize_payload(body)}")

    def _sanitize_payload(self, data: Dict) -> Dict:
        """Remove credentials and secrets from a payload for logging."""
        sanitized = {}
        for key, value in data.items():
            if key in SENSITIVE_FIELDS:
                sanitized[key] = '***'
            elif isinstance(value, dict):
                sanitized[key] = self._sanitize_payload(value)
            else:
                sanitized[key] = value
        return sanitized
    
    def _handle_response(self, response: requests.Response) -> Any:
        """
        Handle API response and extract data.
        
        Digiflazz reports business failures (bad signature, duplicate ref_id,
        ...) with an HTTP error status *and* a regular `{"data": {"rc": ...}}`
        envelope. Such responses are returned so the caller can raise an
        APIError with the response code; anything else with an error status
        is a transport failure.
        
        Args:
            response: Response object from requests
            
        Returns:
            Parsed JSON body
            
        Raises:
            TransportError: If the response is an HTTP error or not JSON
        """
        try:
            body = response.json()
        except ValueError as e:
            self._log_response(response)
            if response.status_code >= 400:
                raise TransportError(
                    f"API request failed with status {response.status_code}",
                    status_code=response.status_code,
                    response_data=response.text
                )
            raise TransportError(
                f"Failed to parse API response: {str(e)}",
                status_code=response.status_code,
                response_data=response.text
            )
        
        self._log_response(response, body)
        
        if response.status_code >= 400 and not self._is_gateway_envelope(body):
            raise TransportError(
                f"API request failed with status {response.status_code}",
                status_code=response.status_code,
                response_data=body
            )
        
        return body
    
    @staticmethod
    def _is_gateway_envelope(body: Any) -> bool:
        return (
            isinstance(body, dict)
            and isinstance(body.get('data'), dict)
            and 'rc' in body['data']
        )
    
    def post(
        self, 
        endpoint: str, 
        data: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None
    ) -> Any:
        """
        Make POST request to API.
        
        Args:
            endpoint: API endpoint path
            data: Request payload, sent as JSON
            headers: Request headers
            
        Returns:
            Parsed JSON body
            
        Raises:
            TransportError: On connection failure, timeout or HTTP error
        """
        url = self._get_full_url(endpoint)
        headers = dict(headers or {})
        headers.setdefault('Content-Type', 'application/json')
        
        self._log_request('POST', url, data)
        
        try:
            response = self.session.post(
                url,
                json=data,
                headers=headers,
                timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Digiflazz API request to {url} failed: {str(e)}")
            raise TransportError(f"Network or server error: {str(e)}") from e
        
        return self._handle_response(response)
    
    def close(self):
        """Close the session."""
        self.session.close()
