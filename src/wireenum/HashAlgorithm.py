import enum
import hashlib
import hmac

from .Classifier import TextClassifier


@enum.unique
class HashAlgorithm(TextClassifier, str, enum.Enum):
  """
  SHA-2 digests used for integrity checks and message authentication.

  Values are the names ``hashlib`` knows the algorithms by, so a member can be
  handed straight to ``hashlib.new`` or ``hmac.new``.
  """
  SHA256 = "sha256"
  SHA384 = "sha384"
  SHA512 = "sha512"

  @property
  def length(self) -> int:
    """Digest size in bytes."""
    return HashAlgorithm._lengths[self]

  def digest(self, data: str | bytes, binary: bool = True) -> bytes | str:
    """
    Hashes ``data``.

    Args:
      data (str | bytes): Input; str is encoded as UTF-8.
      binary (bool, optional): Return raw bytes when True, lowercase hex otherwise.
    """
    hasher = hashlib.new(self.value, _as_bytes(data))
    return hasher.digest() if binary else hasher.hexdigest()

  def hmac(self, data: str | bytes, key: str | bytes, binary: bool = True) -> bytes | str:
    mac = hmac.new(_as_bytes(key), _as_bytes(data), self.value)
    return mac.digest() if binary else mac.hexdigest()

  @classmethod
  def from_string(cls, value: str) -> "HashAlgorithm | None":
    """Returns None for an unknown name; callers are expected to chain a default."""
    return cls._map.get(cls._key(value)) if isinstance(value, str) else None

  @classmethod
  def is_valid(cls, raw) -> bool:
    return cls.from_string(raw) is not None

HashAlgorithm._register("hash algorithm")
HashAlgorithm._lengths = {
  HashAlgorithm.SHA256: 32,
  HashAlgorithm.SHA384: 48,
  HashAlgorithm.SHA512: 64,
}


def _as_bytes(data: str | bytes) -> bytes:
  return data.encode("utf-8") if isinstance(data, str) else data
