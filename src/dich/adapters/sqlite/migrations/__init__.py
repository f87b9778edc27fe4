"""Schema migrations for the SQLite task store."""

from .runner import Migration, migrate, schema_version
from .m001_initial_schema import initial_migration

# Every migration the store knows, in any order
MIGRATIONS: list[Migration] = [initial_migration]

__all__ = [
    "MIGRATIONS",
    "Migration",
    "migrate",
    "schema_version",
]
