import enum

from .Classifier import IntClassifier


@enum.unique
class ResponseBufferSize(IntClassifier, int, enum.Enum):
  """
  Chunk sizes, in bytes, for writing response bodies.

  DEFAULT (8 KiB) suits ordinary pages; the larger sizes trade memory for
  fewer writes on downloads and streams.
  """
  DEFAULT     = 8192
  SMALL       = 4096
  LARGE       = 16384
  EXTRA_LARGE = 32768
  CUSTOM      = 65536

  def __str__(self) -> str:
    return str(self.value)

  @property
  def size(self) -> int:
    """Buffer size in bytes."""
    return self.value

ResponseBufferSize._register("response buffer size")
