import enum
import logging

from .Classifier import TextClassifier


@enum.unique
class LogLevel(TextClassifier, str, enum.Enum):
  """
  Syslog-style severities, most severe first.

  NONE disables output entirely.
  """
  EMERGENCY = "emergency"
  ALERT     = "alert"
  CRITICAL  = "critical"
  ERROR     = "error"
  WARNING   = "warning"
  NOTICE    = "notice"
  INFO      = "info"
  DEBUG     = "debug"
  NONE      = "none"

  @property
  def is_emergency(self) -> bool:
    return self is LogLevel.EMERGENCY

  @property
  def is_alert(self) -> bool:
    return self is LogLevel.ALERT

  @property
  def is_critical(self) -> bool:
    return self is LogLevel.CRITICAL

  @property
  def is_error(self) -> bool:
    return self is LogLevel.ERROR

  @property
  def is_warning(self) -> bool:
    return self is LogLevel.WARNING

  @property
  def is_notice(self) -> bool:
    return self is LogLevel.NOTICE

  @property
  def is_info(self) -> bool:
    return self is LogLevel.INFO

  @property
  def is_debug(self) -> bool:
    return self is LogLevel.DEBUG

  @property
  def is_none(self) -> bool:
    return self is LogLevel.NONE

  def to_logging_level(self) -> int:
    """
    Maps the severity onto the numeric levels of the ``logging`` module.

    Syslog has more levels than ``logging``; EMERGENCY and ALERT collapse
    into CRITICAL and NOTICE into INFO. NONE sits above CRITICAL so a logger
    set to it emits nothing.
    """
    return LogLevel._logging_levels[self]

LogLevel._register("log level")
LogLevel._logging_levels = {
  LogLevel.EMERGENCY: logging.CRITICAL,
  LogLevel.ALERT:     logging.CRITICAL,
  LogLevel.CRITICAL:  logging.CRITICAL,
  LogLevel.ERROR:     logging.ERROR,
  LogLevel.WARNING:   logging.WARNING,
  LogLevel.NOTICE:    logging.INFO,
  LogLevel.INFO:      logging.INFO,
  LogLevel.DEBUG:     logging.DEBUG,
  LogLevel.NONE:      logging.CRITICAL + 10,
}
