import enum

from .Classifier import IntClassifier


@enum.unique
class RedirectType(IntClassifier, int, enum.Enum):
  """3xx status codes a redirect response can be issued with."""
  TEMPORARY          = 302
  PERMANENT          = 301
  SEE_OTHER          = 303
  NOT_MODIFIED       = 304
  USE_PROXY          = 305
  SWITCH_PROXY       = 306
  TEMPORARY_REDIRECT = 307
  PERMANENT_REDIRECT = 308
  MULTIPLE_CHOICES   = 300

  def __str__(self) -> str:
    return self.label

  @property
  def label(self) -> str:
    return RedirectType._labels[self]

RedirectType._register("redirect type")
RedirectType._labels = {
  RedirectType.TEMPORARY:          "Temporary Redirect",
  RedirectType.PERMANENT:          "Permanent Redirect",
  RedirectType.SEE_OTHER:          "See Other",
  RedirectType.NOT_MODIFIED:       "Not Modified",
  RedirectType.USE_PROXY:          "Use Proxy",
  RedirectType.SWITCH_PROXY:       "Switch Proxy",
  RedirectType.TEMPORARY_REDIRECT: "Temporary Redirect",
  RedirectType.PERMANENT_REDIRECT: "Permanent Redirect",
  RedirectType.MULTIPLE_CHOICES:   "Multiple Choices",
}
