from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
  """Structured form of a rejected lookup."""

  code: str = Field(..., description="Machine-readable error code")
  message: str = Field(..., description="Human-readable error message")
  details: Optional[dict[str, Any]] = Field(None, description="Additional context")


class InvalidValueError(ValueError):
  """
  Raised when a raw value does not name any member of an enumeration.

  Args:
    kind (str): Human-readable name of the enumeration (e.g. "cache driver").
    value (Any): The rejected input, kept verbatim.
  """
  def __init__(self, kind: str, value: Any):
    self.kind = kind
    self.value = value
    self.message = f"Invalid {kind}: {value}"
    super().__init__(self.message)

  def to_detail(self) -> ErrorDetail:
    return ErrorDetail(
      code="INVALID_VALUE",
      message=self.message,
      details={"kind": self.kind, "value": self.value},
    )
