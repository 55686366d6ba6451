import enum

from .Classifier import TextClassifier


@enum.unique
class ApiVersion(TextClassifier, str, enum.Enum):
  """Versions of the public API, as they appear in URL prefixes."""
  V1 = "v1"

ApiVersion._register("API version")


@enum.unique
class AppVersion(TextClassifier, str, enum.Enum):
  V1_0_0 = "1.0.0"

  def with_prefix(self, prefix: str) -> str:
    return f"{prefix}{self.value}"

AppVersion._register("application version")


@enum.unique
class CryptoVersion(TextClassifier, str, enum.Enum):
  """Format version stamped on encrypted payloads."""
  V1 = "v1"

CryptoVersion._register("crypto version")
