"""
Constants and enums for Digiflazz API operations.
"""

from enum import Enum


class ResponseCode(str, Enum):
    """
    Response codes (rc) returned by the Digiflazz API.
    See https://developer.digiflazz.com/api/buyer/response-code/
    """
    SUCCESS = "00"
    TIMEOUT = "01"
    TRANSACTION_FAILED = "02"
    PENDING = "03"
    PAYLOAD_ERROR = "40"
    INVALID_SIGNATURE = "41"
    API_BUYER_PROCESSING_ERROR = "42"
    SKU_NOT_FOUND = "43"
    INSUFFICIENT_BALANCE = "44"
    IP_NOT_RECOGNIZED = "45"
    TRANSACTION_EXISTS = "47"
    REF_ID_NOT_UNIQUE = "49"
    TRANSACTION_NOT_FOUND = "50"
    NUMBER_BLOCKED = "51"
    PREFIX_MISMATCH = "52"
    SELLER_PRODUCT_UNAVAILABLE = "53"
    WRONG_DESTINATION_NUMBER = "54"
    PRODUCT_DISRUPTED = "55"
    SELLER_BALANCE_LIMIT = "56"
    DIGIT_COUNT_MISMATCH = "57"
    CUT_OFF = "58"
    DESTINATION_OUT_OF_REGION = "59"
    BILL_NOT_AVAILABLE = "60"
    NEVER_DEPOSITED = "61"
    SELLER_DISRUPTED = "62"
    MULTI_TRANSACTION_UNSUPPORTED = "63"
    TICKET_WITHDRAWAL_FAILED = "64"
    MULTI_TRANSACTION_LIMIT = "65"
    SELLER_CUT_OFF = "66"
    SELLER_NOT_VERIFIED = "67"
    OUT_OF_STOCK = "68"
    KWH_LIMIT_EXCEEDED = "73"
    TRANSACTION_REFUNDED = "74"
    ACCOUNT_BLOCKED_BY_SELLER = "80"
    SELLER_BLOCKED_BY_YOU = "81"
    ACCOUNT_NOT_VERIFIED = "82"
    PRICELIST_LIMIT = "83"
    INVALID_NOMINAL = "84"
    TRANSACTION_LIMIT = "85"
    PLN_INQUIRY_LIMIT = "86"
    ROUTER_ISSUE = "99"


class TransactionStatus(str, Enum):
    """Transaction statuses."""
    SUCCESS = "Sukses"
    FAILED = "Gagal"
    PENDING = "Pending"


class WebhookEvent(str, Enum):
    """Events delivered in the X-Digiflazz-Event header."""
    CREATE = "create"
    UPDATE = "update"
    PING = "ping"


class BankName(str, Enum):
    """Banks accepted for deposit tickets. Names must be upper case."""
    BCA = "BCA"
    MANDIRI = "MANDIRI"
    BRI = "BRI"
    BNI = "BNI"


class PriceListType(str, Enum):
    """Price list command."""
    PREPAID = "prepaid"
    POSTPAID = "pasca"


class TransactionCommand(str, Enum):
    """`commands` values for postpaid transactions."""
    INQUIRY = "inq-pasca"
    PAY = "pay-pasca"
    STATUS = "status-pasca"


# API Endpoints
class APIEndpoints:
    """Digiflazz API endpoints."""
    CHECK_BALANCE = "/cek-saldo"
    DEPOSIT = "/deposit"
    PRICE_LIST = "/price-list"
    TRANSACTION = "/transaction"
    INQUIRY_PLN = "/inquiry-pln"
    TRIGGER_PING = "/report/hooks/{hook_id}/pings"


# Sign identifiers for endpoints that do not sign with a per-call value
SIGN_CHECK_BALANCE = "depo"
SIGN_PRICE_LIST = "pricelist"
SIGN_DEPOSIT = "deposit"

# Webhook headers
SIGNATURE_HEADER = "X-Hub-Signature"
EVENT_HEADER = "X-Digiflazz-Event"
SIGNATURE_ALGORITHM = "sha1"

# Default settings
DEFAULT_API_BASE_URL = "https://api.digiflazz.com/v1"
DEFAULT_TIMEOUT = 30  # seconds
