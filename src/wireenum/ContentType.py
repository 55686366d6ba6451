import enum
import os

from .Classifier import TextClassifier


@enum.unique
class ContentType(TextClassifier, str, enum.Enum):
  """
  MIME types for request and response bodies.

  Provides derivation from a Content-Type header and from file names.
  Derivation helpers return None when nothing matches; ``from_string``
  raises like every other lookup.
  """
  JSON                = "application/json"
  XML                 = "application/xml"
  HTML                = "text/html"
  FORM_URLENCODED     = "application/x-www-form-urlencoded"
  TEXT                = "text/plain"
  MULTIPART_FORM_DATA = "multipart/form-data"
  OCTET_STREAM        = "application/octet-stream"
  ANY                 = "*/*"
  # Static assets
  CSS        = "text/css"
  JAVASCRIPT = "application/javascript"
  PNG        = "image/png"
  JPEG       = "image/jpeg"
  GIF        = "image/gif"
  SVG        = "image/svg+xml"
  ICO        = "image/x-icon"
  PDF        = "application/pdf"
  ZIP        = "application/zip"

  @property
  def is_json(self) -> bool:
    return self is ContentType.JSON

  @property
  def is_xml(self) -> bool:
    return self is ContentType.XML

  @property
  def is_html(self) -> bool:
    return self is ContentType.HTML

  @property
  def is_form_urlencoded(self) -> bool:
    return self is ContentType.FORM_URLENCODED

  @property
  def is_text(self) -> bool:
    return self is ContentType.TEXT

  @property
  def is_multipart_form_data(self) -> bool:
    return self is ContentType.MULTIPART_FORM_DATA

  @property
  def is_octet_stream(self) -> bool:
    return self is ContentType.OCTET_STREAM

  @property
  def is_any(self) -> bool:
    return self is ContentType.ANY

  @property
  def is_image(self) -> bool:
    return self.value.startswith("image/")

  @classmethod
  def from_header(cls, header: str) -> "ContentType | None":
    """
    Reads the media type of a Content-Type header value, ignoring parameters.

    "application/json; charset=utf-8" gives JSON.
    """
    media_type = header.split(";", 1)[0].strip()
    if media_type and cls.is_valid(media_type):
      return cls.from_string(media_type)
    return None

  @classmethod
  def from_file_extension(cls, extension: str) -> "ContentType | None":
    """Accepts the extension with or without its leading dot."""
    return cls._extensions.get(extension.lower().lstrip("."))

  @classmethod
  def from_file_path(cls, path: str) -> "ContentType | None":
    _, ext = os.path.splitext(path)
    return cls.from_file_extension(ext)

  @classmethod
  def from_file(cls, path: str) -> "ContentType | None":
    """Like ``from_file_path``, but a path that does not exist gives None."""
    if not os.path.exists(path):
      return None
    return cls.from_file_path(path)

  @classmethod
  def guess_type(cls, path: str) -> "ContentType":
    """
    Guess the content type based on the file extension.
    Returns OCTET_STREAM if unknown.
    """
    return cls.from_file_path(path) or cls.OCTET_STREAM

# "*" is the short form some clients send in Accept
ContentType._register("content type", aliases={"*": ContentType.ANY})
ContentType._extensions = {
  "json":         ContentType.JSON,
  "xml":          ContentType.XML,
  "html":         ContentType.HTML,
  "htm":          ContentType.HTML,
  "txt":          ContentType.TEXT,
  "form":         ContentType.FORM_URLENCODED,
  "multipart":    ContentType.MULTIPART_FORM_DATA,
  "bin":          ContentType.OCTET_STREAM,
  "octet-stream": ContentType.OCTET_STREAM,
  "css":          ContentType.CSS,
  "js":           ContentType.JAVASCRIPT,
  "mjs":          ContentType.JAVASCRIPT,
  "png":          ContentType.PNG,
  "jpg":          ContentType.JPEG,
  "jpeg":         ContentType.JPEG,
  "gif":          ContentType.GIF,
  "svg":          ContentType.SVG,
  "ico":          ContentType.ICO,
  "pdf":          ContentType.PDF,
  "zip":          ContentType.ZIP,
}
