"""
Custom exceptions for Digiflazz API and webhook operations.
"""


class DigiflazzException(Exception):
    """Base exception for all Digiflazz-related errors."""
    
    def __init__(self, message, error_code=None, response_data=None):
        self.message = message
        self.error_code = error_code
        self.response_data = response_data
        super().__init__(self.message)


class ConfigurationError(DigiflazzException):
    """Raised when there's a configuration issue (credentials, secret, base URL)."""
    pass


class ValidationError(DigiflazzException):
    """Raised when a required request parameter is missing."""
    pass


class APIError(DigiflazzException):
    """
    Raised when the Digiflazz API answers with a non-success response code.
    
    The gateway did receive and reject the request, so `rc` and `status`
    are taken verbatim from its response.
    """
    
    def __init__(self, message, rc=None, status=None, response_data=None):
        super().__init__(message, error_code=rc, response_data=response_data)
        self.rc = rc
        self.status = status
    
    @property
    def is_pending(self):
        return self.status == 'Pending'


class TransportError(DigiflazzException):
    """
    Raised on network or HTTP-level failures.
    The request may not have been processed by the gateway at all.
    """
    
    def __init__(self, message, status_code=None, response_data=None):
        super().__init__(message, error_code=status_code, response_data=response_data)
        self.status_code = status_code


class WebhookError(DigiflazzException):
    """Base class for inbound webhook verification failures."""
    pass


class MissingHeaderError(WebhookError):
    """Raised when the signature or event header is absent."""
    
    def __init__(self, header_name):
        super().__init__(f'Header "{header_name}" not found.')
        self.header_name = header_name


class UnknownEventError(WebhookError):
    """Raised when the event header carries an unsupported event kind."""
    pass


class MalformedSignatureError(WebhookError):
    """Raised when the signature header is not of the form "sha1=<hex>"."""
    pass


class SignatureMismatchError(WebhookError):
    """Raised when the received signature does not match the computed one."""
    pass


class InvalidBodyError(WebhookError):
    """Raised when an authenticated body is not the expected JSON document."""
    pass
