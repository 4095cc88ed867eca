"""Transformer that quotes substituted values for SQL."""

import re
from typing import Any, Callable

from strglue.evaluation.context import BindingContext
from strglue.evaluation.evaluator import evaluate
from strglue.sql.connection import ConnectionHandle, QueryConnection
from strglue.sql.fragment import QueryFragment
from strglue.transformers.base import Transformer, as_vector
from strglue.transformers.collapse import COLLAPSE_MARKER

_COLLAPSE = re.compile(COLLAPSE_MARKER)
_IDENTIFIER = re.compile(r"^\s*`(.*)`\s*$", re.DOTALL)


class SqlTransformer(Transformer):
    """Evaluates blocks and quotes the results with a connection's rules.

    - ``{value}`` is quoted as a literal (``'setosa'``, ``2``, ``NULL``)
    - ``{`name`}`` evaluates ``name`` and quotes the result as an identifier
    - ``{values*}`` quotes each element and joins them with ``, `` for
      ``IN (...)`` lists; an empty collection becomes ``NULL``
    - QueryFragment results are inserted verbatim
    """

    def __init__(self, connection: ConnectionHandle = None):
        self.connection = QueryConnection.resolve(connection)

    @property
    def name(self) -> str:
        """Return the transformer name."""
        return "sql"

    def transform(self, text: str, context: BindingContext) -> Any:
        """Evaluate the block and return quoted SQL fragments."""
        collapse_values = bool(_COLLAPSE.search(text))
        if collapse_values:
            text = _COLLAPSE.sub("", text, count=1)

        quote: Callable[[Any], str]
        match = _IDENTIFIER.match(text)
        if match:
            text = match.group(1)
            quote = self.connection.quote_identifier
        else:
            quote = self.connection.quote_value

        values = as_vector(evaluate(text, context))
        quoted = [QueryFragment(quote(value)) for value in values]

        if collapse_values:
            return QueryFragment(", ".join(quoted) if quoted else "NULL")
        return quoted
