import enum
import os
from typing import Mapping

from .Classifier import TextClassifier

# Name of the process environment variable that selects the deployment stage
ENVIRONMENT_VARIABLE = "APP_ENV"


@enum.unique
class Environment(TextClassifier, str, enum.Enum):
  """Deployment stage an application runs in."""
  DEVELOPMENT = "development"
  PRODUCTION  = "production"
  TESTING     = "testing"
  STAGING     = "staging"

  @property
  def is_development(self) -> bool:
    return self is Environment.DEVELOPMENT

  @property
  def is_production(self) -> bool:
    return self is Environment.PRODUCTION

  @property
  def is_testing(self) -> bool:
    return self is Environment.TESTING

  @property
  def is_staging(self) -> bool:
    return self is Environment.STAGING

  @classmethod
  def from_env(cls, environ: Mapping[str, str] | None = None, default: "Environment | None" = None) -> "Environment":
    """
    Reads the stage from ``APP_ENV``.

    Args:
      environ (Mapping[str, str], optional): Variables to read. Defaults to os.environ.
      default (Environment, optional): Stage used when the variable is unset or empty.
        Defaults to DEVELOPMENT.

    Raises:
      InvalidValueError: The variable is set to an unknown stage.
    """
    if environ is None:
      environ = os.environ
    raw = environ.get(ENVIRONMENT_VARIABLE, "")
    if not raw:
      return default if default is not None else cls.DEVELOPMENT
    return cls.from_string(raw)

Environment._register("environment")
