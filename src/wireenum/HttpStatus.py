import enum

from pydantic import BaseModel

from .Classifier import IntClassifier

# Half-open [low, high) code bands, checked low to high
_BANDS = (
  (100, 200, "Informational"),
  (200, 300, "Success"),
  (300, 400, "Redirection"),
  (400, 500, "Client Error"),
  (500, 600, "Server Error"),
)
UNKNOWN_CATEGORY = "Unknown"


class StatusDetail(BaseModel):
  code: int
  message: str
  category: str


@enum.unique
class HttpStatus(IntClassifier, int, enum.Enum):
  """
  HTTP response status codes with their reason phrases.

  Covers the IANA registry plus the unofficial 52x/53x codes emitted by
  Cloudflare and the 598/599 proxy timeouts. UNKNOWN (0) stands in for a
  status that was never received; it falls in no category.
  """
  def __new__(cls, code: int, message: str = ""):
    member = int.__new__(cls, code)
    member._value_ = code
    member._message = message
    return member

  # 1xx Informational
  CONTINUE            = 100, "Continue"
  SWITCHING_PROTOCOLS = 101, "Switching Protocols"
  PROCESSING          = 102, "Processing"
  EARLY_HINTS         = 103, "Early Hints"
  # 2xx Success
  OK                            = 200, "OK"
  CREATED                       = 201, "Created"
  ACCEPTED                      = 202, "Accepted"
  NON_AUTHORITATIVE_INFORMATION = 203, "Non-Authoritative Information"
  NO_CONTENT                    = 204, "No Content"
  RESET_CONTENT                 = 205, "Reset Content"
  PARTIAL_CONTENT               = 206, "Partial Content"
  MULTI_STATUS                  = 207, "Multi-Status"
  ALREADY_REPORTED              = 208, "Already Reported"
  IM_USED                       = 226, "IM Used"
  # 3xx Redirection
  MULTIPLE_CHOICES   = 300, "Multiple Choices"
  MOVED_PERMANENTLY  = 301, "Moved Permanently"
  FOUND              = 302, "Found"
  SEE_OTHER          = 303, "See Other"
  NOT_MODIFIED       = 304, "Not Modified"
  USE_PROXY          = 305, "Use Proxy"
  TEMPORARY_REDIRECT = 307, "Temporary Redirect"
  PERMANENT_REDIRECT = 308, "Permanent Redirect"
  # 4xx Client Error
  BAD_REQUEST                     = 400, "Bad Request"
  UNAUTHORIZED                    = 401, "Unauthorized"
  PAYMENT_REQUIRED                = 402, "Payment Required"
  FORBIDDEN                       = 403, "Forbidden"
  NOT_FOUND                       = 404, "Not Found"
  METHOD_NOT_ALLOWED              = 405, "Method Not Allowed"
  NOT_ACCEPTABLE                  = 406, "Not Acceptable"
  PROXY_AUTHENTICATION_REQUIRED   = 407, "Proxy Authentication Required"
  REQUEST_TIMEOUT                 = 408, "Request Timeout"
  CONFLICT                        = 409, "Conflict"
  GONE                            = 410, "Gone"
  LENGTH_REQUIRED                 = 411, "Length Required"
  PRECONDITION_FAILED             = 412, "Precondition Failed"
  PAYLOAD_TOO_LARGE               = 413, "Payload Too Large"
  URI_TOO_LONG                    = 414, "URI Too Long"
  UNSUPPORTED_MEDIA_TYPE          = 415, "Unsupported Media Type"
  RANGE_NOT_SATISFIABLE           = 416, "Range Not Satisfiable"
  EXPECTATION_FAILED              = 417, "Expectation Failed"
  IM_A_TEAPOT                     = 418, "I'm a teapot"
  MISDIRECTED_REQUEST             = 421, "Misdirected Request"
  UNPROCESSABLE_ENTITY            = 422, "Unprocessable Entity"
  LOCKED                          = 423, "Locked"
  FAILED_DEPENDENCY               = 424, "Failed Dependency"
  TOO_EARLY                       = 425, "Too Early"
  UPGRADE_REQUIRED                = 426, "Upgrade Required"
  PRECONDITION_REQUIRED           = 428, "Precondition Required"
  TOO_MANY_REQUESTS               = 429, "Too Many Requests"
  REQUEST_HEADER_FIELDS_TOO_LARGE = 431, "Request Header Fields Too Large"
  UNAVAILABLE_FOR_LEGAL_REASONS   = 451, "Unavailable For Legal Reasons"
  # 5xx Server Error
  INTERNAL_SERVER_ERROR           = 500, "Internal Server Error"
  NOT_IMPLEMENTED                 = 501, "Not Implemented"
  BAD_GATEWAY                     = 502, "Bad Gateway"
  SERVICE_UNAVAILABLE             = 503, "Service Unavailable"
  GATEWAY_TIMEOUT                 = 504, "Gateway Timeout"
  HTTP_VERSION_NOT_SUPPORTED      = 505, "HTTP Version Not Supported"
  VARIANT_ALSO_NEGOTIATES         = 506, "Variant Also Negotiates"
  INSUFFICIENT_STORAGE            = 507, "Insufficient Storage"
  LOOP_DETECTED                   = 508, "Loop Detected"
  NOT_EXTENDED                    = 510, "Not Extended"
  NETWORK_AUTHENTICATION_REQUIRED = 511, "Network Authentication Required"
  # 5xx unofficial (Cloudflare, proxies)
  UNKNOWN_ERROR                 = 520, "Unknown Error"
  WEB_SERVER_IS_DOWN            = 521, "Web Server Is Down"
  CONNECTION_TIMED_OUT          = 522, "Connection Timed Out"
  ORIGIN_IS_UNREACHABLE         = 523, "Origin Is Unreachable"
  A_TIMEOUT_OCCURRED            = 524, "A Timeout Occurred"
  SSL_HANDSHAKE_FAILED          = 525, "SSL Handshake Failed"
  INVALID_SSL_CERTIFICATE       = 526, "Invalid SSL Certificate"
  RAILGUN_ERROR                 = 527, "Railgun Error"
  SITE_IS_FROZEN                = 530, "Site Is Frozen"
  NETWORK_READ_TIMEOUT_ERROR    = 598, "Network Read Timeout Error"
  NETWORK_CONNECT_TIMEOUT_ERROR = 599, "Network Connect Timeout Error"

  UNKNOWN = 0, "Unknown Error"

  def __str__(self) -> str:
    return f"{self.code} {self.message}"

  @property
  def code(self) -> int:
    return self.value

  @property
  def message(self) -> str:
    """Reason phrase, or an empty string for a code declared without one."""
    return self._message

  @property
  def category(self) -> str:
    return HttpStatus.category_for(self.value)

  @property
  def is_informational(self) -> bool:
    return 100 <= self.value < 200

  @property
  def is_success(self) -> bool:
    return 200 <= self.value < 300

  @property
  def is_redirection(self) -> bool:
    return 300 <= self.value < 400

  @property
  def is_client_error(self) -> bool:
    return 400 <= self.value < 500

  @property
  def is_server_error(self) -> bool:
    return 500 <= self.value < 600

  def describe(self) -> StatusDetail:
    return StatusDetail(code=self.code, message=self.message, category=self.category)

  @classmethod
  def category_for(cls, code: int) -> str:
    """Name of the band ``code`` falls in, or "Unknown" outside 100-599."""
    for low, high, name in _BANDS:
      if low <= code < high:
        return name
    return UNKNOWN_CATEGORY

  @classmethod
  def resolve(cls, code: int) -> "HttpStatus":
    """Like ``from_int``, but unmapped codes resolve to UNKNOWN instead of raising."""
    return cls._map.get(cls._key(code), cls.UNKNOWN)

  @classmethod
  def _messages_where(cls, predicate) -> dict[int, str]:
    return {status.value: status.message for status in cls if predicate(status)}

  @classmethod
  def informational_messages(cls) -> dict[int, str]:
    return cls._messages_where(lambda status: status.is_informational)

  @classmethod
  def success_messages(cls) -> dict[int, str]:
    return cls._messages_where(lambda status: status.is_success)

  @classmethod
  def redirection_messages(cls) -> dict[int, str]:
    return cls._messages_where(lambda status: status.is_redirection)

  @classmethod
  def client_messages(cls) -> dict[int, str]:
    return cls._messages_where(lambda status: status.is_client_error)

  @classmethod
  def server_messages(cls) -> dict[int, str]:
    return cls._messages_where(lambda status: status.is_server_error)

HttpStatus._register("HTTP status")
