"""Safe construction of SQL statements from templates.

Values are quoted with the rules of a sqlglot dialect, identifiers are
requested with backticks, and results are QueryFragments that compose
into larger statements without double quoting.

Example:
    >>> from strglue.sql import render_query
    >>> render_query("SELECT {`col`} FROM t WHERE x = {val}", "sqlite",
    ...              col="name", val="it's")
    [<SQL> SELECT "name" FROM t WHERE x = 'it''s']
"""

from strglue.sql.connection import ConnectionHandle, QueryConnection
from strglue.sql.fragment import QueryFragment
from strglue.sql.render import render_query
from strglue.sql.transformer import SqlTransformer

__all__ = [
    "ConnectionHandle",
    "QueryConnection",
    "QueryFragment",
    "SqlTransformer",
    "render_query",
]
