import enum

from .Classifier import TextClassifier


@enum.unique
class SameSite(TextClassifier, str, enum.Enum):
  """Values of the ``SameSite`` cookie attribute, spelled as sent on the wire."""
  LAX    = "Lax"
  STRICT = "Strict"
  NONE   = "None"

SameSite._register("SameSite value")
