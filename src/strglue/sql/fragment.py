"""Marker type for SQL text that must not be quoted again."""


class QueryFragment(str):
    """SQL text produced by ``render_query``.

    A fragment interpolated into another ``render_query`` call is spliced
    in verbatim rather than quoted as a string value, which is how
    subqueries are composed.

    Example:
        >>> QueryFragment("SELECT 1")
        <SQL> SELECT 1
    """

    def __repr__(self) -> str:
        return f"<SQL> {str.__str__(self)}"
