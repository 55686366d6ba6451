import enum

from .Classifier import TextClassifier
from .Error import InvalidValueError


@enum.unique
class StatusCodeCategory(TextClassifier, str, enum.Enum):
  """The five classes of HTTP status codes, keyed by their first digit."""
  INFORMATIONAL = "Informational"
  SUCCESS       = "Success"
  REDIRECTION   = "Redirection"
  CLIENT_ERROR  = "Client Error"
  SERVER_ERROR  = "Server Error"

  @property
  def readable_name(self) -> str:
    return self.value

  @classmethod
  def from_code(cls, code: int) -> "StatusCodeCategory":
    """
    Returns the category of a numeric status code.

    Raises:
      InvalidValueError: ``code`` lies outside 100-599.
    """
    if isinstance(code, int) and not isinstance(code, bool) and 100 <= code < 600:
      return cls.all()[code // 100 - 1]
    if cls.logger: cls.logger.debug(f"Rejected {cls._kind} code: {code!r}")
    raise InvalidValueError(cls._kind, code)

StatusCodeCategory._register("status code category")
