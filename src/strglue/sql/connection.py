"""Dialect-aware quoting of identifiers and values for query templates."""

import math
import sqlite3
from datetime import date, datetime, time
from decimal import Decimal
from typing import Any, Optional, Union

from sqlglot import exp
from sqlglot.dialects.dialect import Dialect

from strglue.errors import QuotingError
from strglue.sql.fragment import QueryFragment
from strglue.utils.config import ConfigSettings

ConnectionHandle = Union["QueryConnection", str, Dialect, sqlite3.Connection, None]


class QueryConnection:
    """Quoting rules of a SQL dialect.

    Quoting is delegated to sqlglot's generator for the dialect, so
    identifiers use the dialect's own quote characters (double quotes for
    postgres and sqlite, backticks for mysql and spark) and string
    literals use its escaping rules.

    Example:
        >>> QueryConnection("mysql").quote_identifier("species")
        '`species`'
        >>> QueryConnection("postgres").quote_value("O'Brien")
        "'O''Brien'"
    """

    def __init__(self, dialect: Optional[Union[str, Dialect]] = None):
        """Initialize the connection.

        Args:
            dialect: sqlglot dialect name or instance; None for sqlglot's
                    default dialect.

        Raises:
            QuotingError: If the dialect is unknown.
        """
        try:
            self.dialect = Dialect.get_or_raise(dialect)
        except ValueError as e:
            raise QuotingError(f"Unknown SQL dialect '{dialect}': {e}") from e

    @classmethod
    def resolve(cls, handle: ConnectionHandle) -> "QueryConnection":
        """Build a QueryConnection from any supported connection handle.

        Accepts a QueryConnection, a dialect name or instance, None, or a
        ``sqlite3.Connection`` (which selects the sqlite dialect).

        Raises:
            QuotingError: If the handle type is not supported.
        """
        if isinstance(handle, QueryConnection):
            return handle
        if isinstance(handle, sqlite3.Connection):
            return cls("sqlite")
        if handle is None or isinstance(handle, (str, Dialect)):
            return cls(handle)
        raise QuotingError(
            f"Unsupported connection handle of type {type(handle).__name__}"
        )

    @classmethod
    def from_config(cls, settings: ConfigSettings) -> "QueryConnection":
        """Build a connection for the dialect named in configuration."""
        return cls(settings.dialect)

    def quote_identifier(self, name: Any) -> str:
        """Quote a table or column name.

        Fragments are returned unchanged.
        """
        if isinstance(name, QueryFragment):
            return str(name)
        if not isinstance(name, str):
            raise QuotingError(
                f"Identifiers must be strings, got {type(name).__name__}"
            )
        return exp.to_identifier(name, quoted=True).sql(dialect=self.dialect)

    def quote_value(self, value: Any) -> str:
        """Quote a value as a SQL literal.

        None and NaN become ``NULL``; fragments are returned unchanged.

        Raises:
            QuotingError: If the value type has no SQL literal form.
        """
        if isinstance(value, QueryFragment):
            return str(value)
        if value is None or (isinstance(value, float) and math.isnan(value)):
            return exp.Null().sql(dialect=self.dialect)
        if isinstance(value, bool):
            return exp.Boolean(this=value).sql(dialect=self.dialect)
        if isinstance(value, (int, float, Decimal)):
            return exp.Literal.number(value).sql(dialect=self.dialect)
        if isinstance(value, str):
            return exp.Literal.string(value).sql(dialect=self.dialect)
        if isinstance(value, (datetime, date, time)):
            return exp.convert(value).sql(dialect=self.dialect)

        raise QuotingError(
            f"Cannot quote value of type {type(value).__name__} for SQL"
        )
