import logging

from .Error import ErrorDetail, InvalidValueError
from .Classifier import Classifier, EnumRecord, IntClassifier, TextClassifier
from .CacheDriver import CacheDriver
from .CipherAlgo import CipherAlgo
from .ContentType import ContentType
from .DatabaseDriver import DatabaseDriver
from .Environment import ENVIRONMENT_VARIABLE, Environment
from .HashAlgorithm import HashAlgorithm
from .HttpMethod import DEFAULT_REQUEST_METHOD, REQUEST_METHOD_VARIABLE, HttpMethod
from .HttpStatus import StatusDetail, HttpStatus
from .LogLevel import LogLevel
from .RedirectType import RedirectType
from .ResponseBufferSize import ResponseBufferSize
from .SameSite import SameSite
from .StatusCodeCategory import StatusCodeCategory
from .Version import ApiVersion, AppVersion, CryptoVersion

__version__ = "0.1.0"

__all__ = [
  "ApiVersion",
  "AppVersion",
  "CacheDriver",
  "CipherAlgo",
  "Classifier",
  "ContentType",
  "CryptoVersion",
  "DatabaseDriver",
  "DEFAULT_REQUEST_METHOD",
  "ENVIRONMENT_VARIABLE",
  "EnumRecord",
  "Environment",
  "ErrorDetail",
  "HashAlgorithm",
  "HttpMethod",
  "HttpStatus",
  "IntClassifier",
  "InvalidValueError",
  "LogLevel",
  "REQUEST_METHOD_VARIABLE",
  "RedirectType",
  "ResponseBufferSize",
  "SameSite",
  "StatusCodeCategory",
  "StatusDetail",
  "TextClassifier",
  "set_logger",
]


def set_logger(logger: logging.Logger | None) -> None:
  """
  Installs the logger rejected lookups are reported to, at DEBUG level.
  Pass None to silence them again.
  """
  Classifier.logger = logger
