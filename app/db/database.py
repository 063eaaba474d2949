import os
import sqlite3
from contextlib import closing
from datetime import datetime
from typing import Any, Callable

from app.logging_config import get_logger
from app.settings import settings


DB_VERSION = 1

SQLITE_INTEGER_MIN = -(2**63)
SQLITE_INTEGER_MAX = 2**63 - 1

logger = get_logger("db")


class DatabaseNotInitializedError(Exception):
    """Raised when database operations are attempted before initialization"""
    pass


def register_schema_sql(func: Callable[[], str]) -> Callable[[], str]:
    """Decorator to register SQL returned by a function for schema initialization

    This decorator should be used on functions that return SQL statements
    for table creation, indexes, etc. The function is called immediately
    and its return value is registered for execution during database initialization.

    Example:
        @register_schema_sql
        def _create_memos_table() -> str:
            return "CREATE TABLE IF NOT EXISTS memos (...)"
    """
    sql = func()
    Database._schema_registry.append(sql)
    return func


class Database:
    """SQLite database connection manager with schema registration"""

    _schema_registry: list[str] = []

    def __init__(self, db_path: str | None = None) -> None:
        self.db_path = db_path if db_path is not None else settings.db_path
        self._initialized = False

    def _initialize_schema(self) -> None:
        """Execute all registered schema SQL against the database file"""
        if self._initialized:
            return

        with closing(self.get_connection()) as conn:
            cursor = conn.cursor()
            self._set_db_version(cursor)

            for sql in self._schema_registry:
                cursor.execute(sql)

            conn.commit()

        self._initialized = True
        logger.info("Database schema initialized at %s (version %d)", self.db_path, DB_VERSION)

    def _set_db_version(self, cursor: sqlite3.Cursor) -> None:
        cursor.execute("CREATE TABLE IF NOT EXISTS db_version (version INTEGER NOT NULL)")
        cursor.execute("DELETE FROM db_version")
        cursor.execute("INSERT INTO db_version (version) VALUES (?)", (DB_VERSION,))

    def _get_db_version(self) -> int | None:
        with closing(self.get_connection()) as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name='db_version'"
            )
            if cursor.fetchone() is None:
                return None

            cursor.execute("SELECT version FROM db_version LIMIT 1")
            result = cursor.fetchone()
            return result[0] if result else None

    def _handle_version_mismatch(self) -> None:
        """Handle database version mismatch by deleting or renaming the old db file"""
        if not os.path.exists(self.db_path):
            return

        if settings.preserve_old_db:
            self._backup_db()
        else:
            os.remove(self.db_path)
            logger.warning("Old database deleted: %s", self.db_path)

    def _backup_db(self) -> None:
        timestamp = datetime.now().strftime("%Y%m%d%H%M%S")
        root, ext = os.path.splitext(self.db_path)
        backup_path = f"{root}-{timestamp}{ext}"
        if os.path.exists(backup_path):
            os.remove(self.db_path)
            logger.warning("Old database deleted - %s already exists", backup_path)
        else:
            os.rename(self.db_path, backup_path)
            logger.warning("Old database renamed to: %s", backup_path)

    def _check_and_handle_version(self) -> None:
        """Check database version and handle mismatch if necessary"""
        if not os.path.exists(self.db_path):
            return

        current_version = self._get_db_version()
        if current_version != DB_VERSION:
            logger.warning(
                "Database is not up to date (db version: %s, schema version: %d)",
                current_version,
                DB_VERSION,
            )
            self._handle_version_mismatch()

    def setup(self) -> None:
        """Check database version and initialize schema"""
        db_dir = os.path.dirname(self.db_path)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
        self._check_and_handle_version()
        self._initialize_schema()

    def _check_initialized(self) -> None:
        """Check if database has been initialized, raise error if not"""
        if not self._initialized:
            raise DatabaseNotInitializedError(
                "Database has not been initialized. Call setup() first."
            )

    def get_connection(self) -> sqlite3.Connection:
        """Get a database connection"""
        conn = sqlite3.connect(self.db_path)
        conn.row_factory = sqlite3.Row  # Access columns by name
        conn.execute("PRAGMA foreign_keys = ON")
        return conn

    def execute_query(self, query: str, params: tuple[Any, ...] = ()) -> list[sqlite3.Row]:
        """Execute a SELECT query and return results"""
        self._check_initialized()
        with closing(self.get_connection()) as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            return cursor.fetchall()

    def execute_insert(self, query: str, params: tuple[Any, ...] = ()) -> int:
        """Execute an INSERT query and return the id of the new row"""
        self._check_initialized()
        with closing(self.get_connection()) as conn:
            cursor = conn.cursor()
            cursor.execute(query, params)
            conn.commit()
            return cursor.lastrowid


def fits_sqlite_integer(value: int) -> bool:
    """Whether an int can be bound as a SQLite INTEGER parameter"""
    return SQLITE_INTEGER_MIN <= value <= SQLITE_INTEGER_MAX
