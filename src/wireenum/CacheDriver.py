import enum

from .Classifier import TextClassifier


@enum.unique
class CacheDriver(TextClassifier, str, enum.Enum):
  """
  Cache backends an application can be configured with.
  """
  APCU      = "apcu"
  FILE      = "file"
  MEMORY    = "memory"
  REDIS     = "redis"
  MEMCACHED = "memcached"
  DATABASE  = "database"

CacheDriver._register("cache driver")
