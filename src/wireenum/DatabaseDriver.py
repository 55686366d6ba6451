import enum

from .Classifier import TextClassifier


@enum.unique
class DatabaseDriver(TextClassifier, str, enum.Enum):
  """Database engines recognized by connection configuration."""
  MYSQL         = "mysql"
  POSTGRESQL    = "postgresql"
  SQLITE        = "sqlite"
  MONGODB       = "mongodb"
  SQLSERVER     = "sqlserver"
  ORACLE        = "oracle"
  REDIS         = "redis"
  CASSANDRA     = "cassandra"
  DYNAMODB      = "dynamodb"
  COUCHBASE     = "couchbase"
  ELASTICSEARCH = "elasticsearch"
  CLICKHOUSE    = "clickhouse"
  MARIADB       = "mariadb"
  COCKROACHDB   = "cockroachdb"
  FIREBIRD      = "firebird"

DatabaseDriver._register("database driver")
