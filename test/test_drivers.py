import pytest

from wireenum import CacheDriver, DatabaseDriver, InvalidValueError


class TestCacheDriver:
  """Test cache driver lookups and formatting."""

  def test_from_string_returns_correct_member(self):
    """Test mixed-case names resolve."""
    assert CacheDriver.from_string("apcu") is CacheDriver.APCU
    assert CacheDriver.from_string("FiLe") is CacheDriver.FILE
    assert CacheDriver.from_string("MEMORY") is CacheDriver.MEMORY
    assert CacheDriver.from_string("Memcached") is CacheDriver.MEMCACHED

  def test_from_string_rejects_unknown(self):
    """Test the error message names the kind and the input."""
    with pytest.raises(InvalidValueError) as exc_info:
      CacheDriver.from_string("invalid")
    assert str(exc_info.value) == "Invalid cache driver: invalid"

  def test_is_valid(self):
    """Test validity checks never raise."""
    assert CacheDriver.is_valid("FILE")
    assert CacheDriver.is_valid("redis")
    assert not CacheDriver.is_valid("foobar")
    assert not CacheDriver.is_valid("")
    assert not CacheDriver.is_valid("null")

  def test_all(self):
    """Test all() keeps declaration order."""
    assert CacheDriver.all() == [
      CacheDriver.APCU,
      CacheDriver.FILE,
      CacheDriver.MEMORY,
      CacheDriver.REDIS,
      CacheDriver.MEMCACHED,
      CacheDriver.DATABASE,
    ]

  def test_to_dict(self):
    """Test serialization to a name/value record."""
    assert CacheDriver.MEMCACHED.to_dict() == {"name": "MEMCACHED", "value": "memcached"}

  def test_case_projections(self):
    """Test the formatting accessors."""
    driver = CacheDriver.REDIS
    assert driver.name == "REDIS"
    assert driver.value == "redis"
    assert driver.lowercase_name == "redis"
    assert driver.uppercase_name == "REDIS"
    assert driver.lowercase_value == "redis"
    assert driver.uppercase_value == "REDIS"
    assert driver.title_case_value == "Redis"

  def test_compares_equal_to_wire_value(self):
    """Test members can be used where the raw string is expected."""
    assert CacheDriver.FILE == "file"


class TestDatabaseDriver:
  """Test database driver lookups and formatting."""

  def test_from_string(self):
    """Test mixed-case names resolve."""
    assert DatabaseDriver.from_string("mysql") is DatabaseDriver.MYSQL
    assert DatabaseDriver.from_string("POSTGRESQL") is DatabaseDriver.POSTGRESQL
    assert DatabaseDriver.from_string("Sqlite") is DatabaseDriver.SQLITE

  def test_from_string_rejects_unknown(self):
    """Test the error message names the kind and the input."""
    with pytest.raises(InvalidValueError, match="^Invalid database driver: nosql$"):
      DatabaseDriver.from_string("nosql")

  def test_is_valid(self):
    """Test validity checks never raise."""
    assert DatabaseDriver.is_valid("ORACLE")
    assert DatabaseDriver.is_valid("ClickHouse")
    assert not DatabaseDriver.is_valid("mssql")
    assert not DatabaseDriver.is_valid("sql-light")

  def test_all(self):
    """Test every driver is listed."""
    drivers = DatabaseDriver.all()
    assert len(drivers) == 15
    assert drivers[0] is DatabaseDriver.MYSQL
    assert drivers[-1] is DatabaseDriver.FIREBIRD

  def test_case_projections(self):
    """Test the formatting accessors."""
    assert DatabaseDriver.MYSQL.lowercase_name == "mysql"
    assert DatabaseDriver.SQLITE.uppercase_name == "SQLITE"
    assert DatabaseDriver.SQLSERVER.title_case_name == "Sqlserver"
    assert DatabaseDriver.COUCHBASE.snake_case_name == "couchbase"
    assert DatabaseDriver.DYNAMODB.kebab_case_name == "dynamodb"
