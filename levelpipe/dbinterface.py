"""A small database interface with an SQLite implementation and text record sets."""

from __future__ import annotations

import logging
import sqlite3
from abc import ABC, abstractmethod
from collections.abc import Iterator, Mapping
from dataclasses import dataclass

logger = logging.getLogger(__name__)

DB_CONNECTION_PARAM_FILE_NAME = "fileName"
NULL_TEXT = "NULL"


@dataclass
class Field:
    """The text value of one column in a row."""

    value: str
    is_null: bool = False


class Row:
    """One row of a record set, its fields keyed by column name."""

    def __init__(self) -> None:
        self._fields: dict[str, Field] = {}

    @property
    def field_names(self) -> list[str]:
        return sorted(self._fields)

    def get_field_value(self, field_name: str) -> str | None:
        field = self._fields.get(field_name)
        if field is None:
            logger.error("Value for fieldName '%s' not found!", field_name)
            return None
        return field.value

    def is_field_null(self, field_name: str) -> bool:
        """True if the field is NULL; a missing field counts as NULL."""
        field = self._fields.get(field_name)
        if field is None:
            logger.error("Field with fieldName '%s' not found in Row!", field_name)
            return True
        return field.is_null

    def set_field_value(self, field_name: str, value: str, is_null: bool = False) -> None:
        self._fields[field_name] = Field(value, is_null)


class RecordSet:
    """The rows returned by a query."""

    def __init__(self) -> None:
        self._rows: list[Row] = []

    @property
    def rows(self) -> tuple[Row, ...]:
        return tuple(self._rows)

    @property
    def row_count(self) -> int:
        return len(self._rows)

    def add_new_row(self) -> Row:
        row = Row()
        self._rows.append(row)
        return row

    def _row_at(self, row_index: int) -> Row | None:
        if 0 <= row_index < len(self._rows):
            return self._rows[row_index]
        return None

    def get_value(self, field_name: str, row_index: int) -> str | None:
        row = self._row_at(row_index)
        value = row.get_field_value(field_name) if row is not None else None
        if value is None:
            logger.error("No value found for column %s in row %d", field_name, row_index)
        return value

    def is_null(self, field_name: str, row_index: int) -> bool:
        """True if the field is NULL; missing rows and fields count as NULL."""
        row = self._row_at(row_index)
        if row is None:
            logger.error(
                "Row index '%d' is out of bounds while reading property of field '%s'",
                row_index,
                field_name,
            )
            return True
        return row.is_field_null(field_name)


class Database(ABC):
    """A database connection that returns query results as record sets."""

    def __init__(self) -> None:
        self._is_open = False

    @property
    def is_open(self) -> bool:
        return self._is_open

    @abstractmethod
    def open(self, connection_params: Mapping[str, str]) -> None:
        """Open the connection described by the parameters."""

    @abstractmethod
    def close(self) -> None:
        """Close the connection if it is open."""

    @abstractmethod
    def execute_query(self, sql: str) -> RecordSet:
        """Run SQL and return the rows it produced."""

    def __enter__(self) -> Database:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class SQLiteDatabase(Database):
    """A database stored in an SQLite file, named by the ``fileName`` parameter."""

    def __init__(self) -> None:
        super().__init__()
        self._connection: sqlite3.Connection | None = None

    def open(self, connection_params: Mapping[str, str]) -> None:
        if self.is_open:
            return
        try:
            file_name = connection_params[DB_CONNECTION_PARAM_FILE_NAME]
        except KeyError:
            raise ValueError(
                "Failed to open DB. connectionParams is lacking parameter "
                f"'{DB_CONNECTION_PARAM_FILE_NAME}'"
            ) from None
        try:
            self._connection = sqlite3.connect(file_name, isolation_level=None)
        except sqlite3.Error as exc:
            logger.error("Opening DB failed. %s", exc)
            raise
        self._is_open = True
        logger.info("DB opened successful!")

    def close(self) -> None:
        if not self.is_open or self._connection is None:
            return
        try:
            self._connection.close()
        except sqlite3.Error as exc:
            logger.error("Closing DB failed. %s", exc)
            raise
        self._connection = None
        self._is_open = False
        logger.info("DB closed successful!")

    def execute_query(self, sql: str) -> RecordSet:
        if self._connection is None:
            raise sqlite3.ProgrammingError("the database is not open")
        result = RecordSet()
        try:
            for statement in _statements(sql):
                cursor = self._connection.execute(statement)
                if cursor.description is None:
                    continue
                names = [column[0] for column in cursor.description]
                for values in cursor:
                    row = result.add_new_row()
                    for name, value in zip(names, values):
                        row.set_field_value(name, _as_text(value), value is None)
        except sqlite3.Error as exc:
            logger.error("failed executing SQL '%s' : %s", sql, exc)
            raise
        logger.info("executed SQL '%s'", sql)
        return result


def _statements(sql: str) -> Iterator[str]:
    """Split SQL text into complete statements."""
    *pieces, tail = sql.split(";")
    pending = ""
    for piece in pieces:
        pending += piece + ";"
        if sqlite3.complete_statement(pending):
            if pending.strip(" \t\r\n;"):
                yield pending
            pending = ""
    pending += tail
    if pending.strip():
        yield pending


def _as_text(value: object) -> str:
    if value is None:
        return NULL_TEXT
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)