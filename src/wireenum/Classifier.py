import logging
import string
from typing import Any

from pydantic import BaseModel

from .Error import InvalidValueError


class EnumRecord(BaseModel):
  """Interchange form of a single member: its symbolic name and wire value."""

  name: str
  value: str | int


class Classifier:
  """
  Mixin for closed-set enumerations.

  Concrete types mix this in ahead of their wire type and ``enum.Enum``:

    class CacheDriver(TextClassifier, str, enum.Enum):
      FILE = "file"
      ...

    CacheDriver._register("cache driver")

  ``_register`` builds the lookup table once, right after the class body,
  keyed by the normalized wire value.
  """
  logger: logging.Logger | None = None
  _kind: str
  _map: dict[Any, Any]

  @classmethod
  def _register(cls, kind: str, aliases: dict[Any, Any] | None = None) -> None:
    cls._kind = kind
    cls._map = {cls._key(member.value): member for member in cls}
    if aliases:
      cls._map.update({cls._key(raw): member for raw, member in aliases.items()})

  @classmethod
  def _key(cls, raw: Any) -> Any:
    return raw

  @classmethod
  def parse(cls, raw: Any):
    """
    Returns the member whose wire value matches ``raw``.

    Raises:
      InvalidValueError: ``raw`` does not name any member.
    """
    try:
      return cls._map[cls._key(raw)]
    except (KeyError, TypeError):
      if cls.logger: cls.logger.debug(f"Rejected {cls._kind} value: {raw!r}")
      raise InvalidValueError(cls._kind, raw) from None

  @classmethod
  def is_valid(cls, raw: Any) -> bool:
    try:
      cls.parse(raw)
    except InvalidValueError:
      return False
    return True

  @classmethod
  def all(cls) -> list:
    """Every member, in declaration order."""
    return list(cls)

  @classmethod
  def values(cls) -> list:
    return [member.value for member in cls]

  def to_record(self) -> EnumRecord:
    return EnumRecord(name=self.name, value=self.value)

  def to_dict(self) -> dict[str, Any]:
    return self.to_record().model_dump()


class TextClassifier(Classifier):
  """Classifier over string wire values. Lookups ignore case."""

  @classmethod
  def _key(cls, raw: Any) -> Any:
    return raw.lower() if isinstance(raw, str) else raw

  @classmethod
  def from_string(cls, value: str):
    return cls.parse(value)

  # The *_name projections are taken from the wire value, not the member name.
  @property
  def lowercase_name(self) -> str:
    return self.value.lower()

  @property
  def uppercase_name(self) -> str:
    return self.value.upper()

  @property
  def title_case_name(self) -> str:
    return string.capwords(self.value.lower())

  @property
  def snake_case_name(self) -> str:
    return self.value.lower().replace(" ", "_")

  @property
  def kebab_case_name(self) -> str:
    return self.value.lower().replace(" ", "-")

  @property
  def lowercase_value(self) -> str:
    return self.value.lower()

  @property
  def uppercase_value(self) -> str:
    return self.value.upper()

  @property
  def title_case_value(self) -> str:
    return string.capwords(self.value.lower())


class IntClassifier(Classifier):
  """Classifier over integer wire values."""

  @classmethod
  def _key(cls, raw: Any) -> Any:
    # bool is an int subclass; True must not resolve to a member valued 1
    if isinstance(raw, bool) or not isinstance(raw, int):
      return None
    return raw

  @classmethod
  def from_int(cls, value: int):
    return cls.parse(value)

  def to_int(self) -> int:
    return self.value
