"""Building SQL statements from templates."""

from typing import Any, List, Mapping, Optional

from strglue.rendering.options import RenderOptions
from strglue.rendering.renderer import OptionsArg, TemplateParts, render
from strglue.sql.connection import ConnectionHandle
from strglue.sql.fragment import QueryFragment
from strglue.sql.transformer import SqlTransformer


def render_query(
    template: TemplateParts,
    connection: ConnectionHandle = None,
    context: Optional[Mapping[str, Any]] = None,
    options: OptionsArg = None,
    **variables: Any,
) -> List[QueryFragment]:
    """Render a SQL statement with every substituted value quoted.

    Args:
        template: Template text or parts.
        connection: Connection handle selecting the quoting rules: a
                   QueryConnection, sqlglot dialect name or instance, or a
                   ``sqlite3.Connection``.
        context: Names visible to expressions.
        options: RenderOptions or dict; the transformer option is replaced.
        **variables: Named variables.

    Returns:
        One QueryFragment per broadcast row. Fragments can be interpolated
        into further ``render_query`` calls without being re-quoted.

    Raises:
        QuotingError: If a value cannot be represented in SQL.

    Example:
        >>> render_query("SELECT * FROM {`tbl`} WHERE id IN ({ids*})",
        ...              "postgres", tbl="users", ids=[1, 2])
        [<SQL> SELECT * FROM "users" WHERE id IN (1, 2)]
    """
    options = RenderOptions.coerce(options).merged(
        transformer=SqlTransformer(connection)
    )
    return [
        QueryFragment(row) for row in render(template, context, options, **variables)
    ]
