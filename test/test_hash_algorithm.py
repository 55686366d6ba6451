import hashlib
import hmac

import pytest

from wireenum import HashAlgorithm, InvalidValueError

MESSAGE = "Hello, World!"
KEY = "secret_key"


class TestHashAlgorithm:
  """Test digest dispatch and the optional lookup."""

  @pytest.mark.parametrize("algorithm,length", [
    (HashAlgorithm.SHA256, 32),
    (HashAlgorithm.SHA384, 48),
    (HashAlgorithm.SHA512, 64),
  ])
  def test_length(self, algorithm, length):
    """Test digest sizes in bytes."""
    assert algorithm.length == length
    assert len(algorithm.digest(MESSAGE)) == length

  def test_sha256_digest(self):
    """Test the digest matches hashlib on the same bytes."""
    assert HashAlgorithm.SHA256.digest(MESSAGE) == hashlib.sha256(MESSAGE.encode()).digest()
    assert HashAlgorithm.SHA256.digest(MESSAGE, binary=False) == hashlib.sha256(MESSAGE.encode()).hexdigest()

  @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
  def test_digest_accepts_bytes(self, algorithm):
    """Test str input is hashed as its UTF-8 bytes."""
    assert algorithm.digest(MESSAGE) == algorithm.digest(MESSAGE.encode("utf-8"))

  @pytest.mark.parametrize("algorithm", list(HashAlgorithm))
  def test_hmac(self, algorithm):
    """Test the keyed digest matches the hmac module."""
    expected = hmac.new(KEY.encode(), MESSAGE.encode(), algorithm.value)
    assert algorithm.hmac(MESSAGE, KEY) == expected.digest()
    assert algorithm.hmac(MESSAGE, KEY, binary=False) == expected.hexdigest()

  def test_from_string_is_optional(self):
    """Test unknown names give None instead of raising."""
    assert HashAlgorithm.from_string("SHA256") is HashAlgorithm.SHA256
    assert HashAlgorithm.from_string("sha512") is HashAlgorithm.SHA512
    assert HashAlgorithm.from_string("md5") is None
    assert (HashAlgorithm.from_string("md5") or HashAlgorithm.SHA256) is HashAlgorithm.SHA256

  def test_is_valid(self):
    """Test validity follows the optional lookup."""
    assert HashAlgorithm.is_valid("sha384")
    assert not HashAlgorithm.is_valid("md5")

  def test_parse_still_raises(self):
    """Test the generic lookup keeps the fail-fast contract."""
    with pytest.raises(InvalidValueError, match="^Invalid hash algorithm: md5$"):
      HashAlgorithm.parse("md5")
