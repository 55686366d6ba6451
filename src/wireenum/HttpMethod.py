import enum
import os
from typing import Mapping

from .Classifier import TextClassifier

# CGI/WSGI key carrying the request method, and the method assumed when it is absent
REQUEST_METHOD_VARIABLE = "REQUEST_METHOD"
DEFAULT_REQUEST_METHOD = "GET"


@enum.unique
class HttpMethod(TextClassifier, str, enum.Enum):
  """
  HTTP request methods.

  The classification properties follow RFC 9110 (safe, idempotent) and
  RFC 9111 (cacheable). ANY is a routing wildcard, not a real method, and
  belongs to none of the classes.
  """
  GET     = "GET"
  POST    = "POST"
  PUT     = "PUT"
  DELETE  = "DELETE"
  PATCH   = "PATCH"
  HEAD    = "HEAD"
  OPTIONS = "OPTIONS"
  CONNECT = "CONNECT"
  TRACE   = "TRACE"
  ANY     = "ANY"

  def __str__(self) -> str:
    return f"HttpMethod({self.value})"

  @property
  def is_safe(self) -> bool:
    return self in HttpMethod._safe

  @property
  def is_idempotent(self) -> bool:
    return self in HttpMethod._idempotent

  @property
  def is_cacheable(self) -> bool:
    return self in HttpMethod._cacheable

  @property
  def is_write_operation(self) -> bool:
    return self in HttpMethod._write

  @property
  def is_read_operation(self) -> bool:
    return self in HttpMethod._read

  @classmethod
  def from_server_request(cls, environ: Mapping[str, str] | None = None) -> "HttpMethod":
    """
    Classifies the method of the request being served.

    Args:
      environ (Mapping[str, str], optional): A WSGI environ or CGI-style mapping.
        Defaults to os.environ.
    """
    if environ is None:
      environ = os.environ
    return cls.from_string(environ.get(REQUEST_METHOD_VARIABLE, DEFAULT_REQUEST_METHOD))

HttpMethod._register("HTTP method")
HttpMethod._safe       = frozenset({HttpMethod.GET, HttpMethod.HEAD, HttpMethod.OPTIONS, HttpMethod.TRACE})
HttpMethod._idempotent = HttpMethod._safe | {HttpMethod.PUT, HttpMethod.DELETE}
HttpMethod._cacheable  = frozenset({HttpMethod.GET, HttpMethod.HEAD, HttpMethod.OPTIONS})
HttpMethod._write      = frozenset({HttpMethod.POST, HttpMethod.PUT, HttpMethod.DELETE, HttpMethod.PATCH})
HttpMethod._read       = frozenset({HttpMethod.GET, HttpMethod.HEAD, HttpMethod.OPTIONS, HttpMethod.TRACE})
