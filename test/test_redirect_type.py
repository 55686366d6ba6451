import pytest

from wireenum import InvalidValueError, RedirectType


class TestRedirectType:
  """Test redirect code lookups."""

  def test_from_int(self):
    """Test every code resolves."""
    assert RedirectType.from_int(301) is RedirectType.PERMANENT
    assert RedirectType.from_int(302) is RedirectType.TEMPORARY
    assert RedirectType.from_int(306) is RedirectType.SWITCH_PROXY
    assert RedirectType.from_int(308) is RedirectType.PERMANENT_REDIRECT
    assert RedirectType.from_int(300) is RedirectType.MULTIPLE_CHOICES

  def test_from_int_rejects_unknown(self):
    """Test the error carries the code."""
    with pytest.raises(InvalidValueError, match="^Invalid redirect type: 999$"):
      RedirectType.from_int(999)

  def test_is_valid(self):
    """Test validity checks never raise."""
    assert RedirectType.is_valid(301)
    assert RedirectType.is_valid(300)
    assert not RedirectType.is_valid(404)
    assert not RedirectType.is_valid(0)
    assert not RedirectType.is_valid(-1)

  def test_to_int(self):
    """Test the numeric form."""
    assert RedirectType.PERMANENT.to_int() == 301
    assert RedirectType.NOT_MODIFIED.to_int() == 304

  def test_label(self):
    """Test human-readable names."""
    assert str(RedirectType.from_int(301)) == "Permanent Redirect"
    assert RedirectType.TEMPORARY.label == "Temporary Redirect"
    assert RedirectType.SEE_OTHER.label == "See Other"
    assert RedirectType.USE_PROXY.label == "Use Proxy"
    assert RedirectType.MULTIPLE_CHOICES.label == "Multiple Choices"

  def test_all(self):
    """Test declaration order, which is not numeric order."""
    assert RedirectType.all() == [
      RedirectType.TEMPORARY,
      RedirectType.PERMANENT,
      RedirectType.SEE_OTHER,
      RedirectType.NOT_MODIFIED,
      RedirectType.USE_PROXY,
      RedirectType.SWITCH_PROXY,
      RedirectType.TEMPORARY_REDIRECT,
      RedirectType.PERMANENT_REDIRECT,
      RedirectType.MULTIPLE_CHOICES,
    ]

  def test_to_dict(self):
    """Test the record keeps the integer value."""
    assert RedirectType.PERMANENT.to_dict() == {"name": "PERMANENT", "value": 301}
