"""Tests for collapsing."""

from strglue.evaluation.context import BindingContext
from strglue.rendering.options import RenderOptions
from strglue.rendering.renderer import render
from strglue.transformers.collapse import CollapseTransformer, collapse


class TestCollapseFunction:
    """Tests for the collapse helper."""

    def test_separator(self):
        """Test joining with a separator."""
        assert collapse([1, 2, 3], sep=", ") == "1, 2, 3"

    def test_last(self):
        """Test a distinct separator before the final element."""
        assert collapse(["a", "b", "c"], sep=", ", last=" and ") == "a, b and c"

    def test_last_single_element(self):
        """Test that last is not used for a single element."""
        assert collapse(["a"], sep=", ", last=" and ") == "a"

    def test_empty(self):
        """Test that no values give an empty string."""
        assert collapse([], sep=", ") == ""

    def test_width_truncates(self):
        """Test truncation with an ellipsis."""
        assert collapse(range(10), sep=" ", width=10) == "0 1 2 3..."

    def test_width_not_needed(self):
        """Test that short results are untouched."""
        assert collapse(["ab"], width=10) == "ab"

    def test_scalar(self):
        """Test that a scalar collapses to itself."""
        assert collapse("single") == "single"

    def test_na(self):
        """Test that None uses the NA marker."""
        assert collapse([1, None], sep=",") == "1,NA"


class TestCollapseTransformer:
    """Tests for CollapseTransformer."""

    def test_marker_collapses(self):
        """Test that a trailing '*' collapses the result."""
        transformer = CollapseTransformer(sep=", ")
        assert transformer("range(1, 6)*", BindingContext()) == "1, 2, 3, 4, 5"

    def test_no_marker_passes_through(self):
        """Test that blocks without the marker are evaluated normally."""
        transformer = CollapseTransformer(sep=", ")
        assert transformer("[1, 2]", BindingContext()) == [1, 2]

    def test_render_collapse(self):
        """Test the collapse transformer in a render call."""
        options = RenderOptions(transformer=CollapseTransformer(sep=", "))
        assert render("{range(1, 6)*}", options=options) == ["1, 2, 3, 4, 5"]

    def test_render_collapse_last(self):
        """Test multi-line templates with a last separator."""
        options = RenderOptions(
            transformer=CollapseTransformer(sep=", ", last=" and ")
        )
        result = render(["{range(1, 6)*}", "{'abcde'[:5]}"], options=options)
        assert result == ["1, 2, 3, 4 and 5\nabcde"]

    def test_collapsed_blocks_with_vectors(self):
        """Test that collapsed blocks repeat across vector rows."""
        options = RenderOptions(transformer=CollapseTransformer(sep=", "))
        result = render("{x}: {range(1, 4)*}", options=options, x=["one", "two"])
        assert result == ["one: 1, 2, 3", "two: 1, 2, 3"]

    def test_custom_regex(self):
        """Test a custom collapse marker."""
        transformer = CollapseTransformer(regex=r"\+$", sep="+")
        assert transformer("[1, 2]+", BindingContext()) == "1+2"

    def test_name(self):
        """Test the transformer name."""
        assert CollapseTransformer().name == "collapse"


class TestCollapseMarker:
    """Tests for the collapse marker rule."""

    def test_whitespace_after_marker(self):
        """Test that spaces between '*' and the close delimiter are allowed."""
        options = RenderOptions(transformer=CollapseTransformer(sep=","))
        assert render("{ [1, 2]* }", options=options) == ["1,2"]

    def test_marker_shared_with_sql(self):
        """Test that query templates accept the same marker spacing."""
        from strglue.sql.render import render_query

        assert render_query("IN ({ ids* })", "postgres", ids=[1, 2]) == ["IN (1, 2)"]

    def test_multiplication_not_marker(self):
        """Test that '*' followed by an operand is not the marker."""
        transformer = CollapseTransformer()
        assert transformer("2 * 3", BindingContext()) == 6


class TestCollapseNa:
    """Tests for missing values inside collapsed blocks."""

    def test_follows_render_na(self):
        """Test that collapsed blocks use the render call's NA marker."""
        options = RenderOptions(transformer=CollapseTransformer(sep=","), na="-")
        assert render("{[1, None]*} {None}", options=options) == ["1,- -"]

    def test_named_transformer_follows_render_na(self):
        """Test the NA marker for a transformer selected by name."""
        options = {"transformer": "collapse", "na": "?"}
        assert render("{[None, 2]*}", options=options) == ["?2"]

    def test_explicit_na_wins(self):
        """Test that an explicit na on the transformer is kept."""
        options = RenderOptions(
            transformer=CollapseTransformer(sep=",", na="missing"), na="-"
        )
        assert render("{[1, None]*} {None}", options=options) == ["1,missing -"]

    def test_default_na_when_called_directly(self):
        """Test the NA marker outside a render call."""
        transformer = CollapseTransformer(sep=",")
        assert transformer("[1, None]*", BindingContext()) == "1,NA"
