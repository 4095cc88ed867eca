"""Tests for the expression = value shorthand."""

from strglue.evaluation.context import BindingContext
from strglue.rendering.wrappers import render_vv
from strglue.transformers.vv import VariableValueTransformer


class TestVariableValueTransformer:
    """Tests for VariableValueTransformer."""

    def test_scalar(self):
        """Test a scalar value."""
        transformer = VariableValueTransformer()
        assert transformer("a=", BindingContext({"a": 3})) == "a = 3"

    def test_expression_whitespace(self):
        """Test that surrounding whitespace is dropped from the label."""
        transformer = VariableValueTransformer()
        assert transformer(" a + 1 = ", BindingContext({"a": 3})) == "a + 1 = 4"

    def test_vector_bracketed(self):
        """Test that vector values are shown in brackets."""
        transformer = VariableValueTransformer()
        assert transformer("x=", BindingContext({"x": [1, 2]})) == "x = [1, 2]"

    def test_comparison_not_marker(self):
        """Test that '==' inside an expression is not the marker."""
        transformer = VariableValueTransformer()
        assert transformer("a == 3", BindingContext({"a": 3})) is True

    def test_without_marker(self):
        """Test that plain blocks evaluate normally."""
        transformer = VariableValueTransformer()
        assert transformer("a * 2", BindingContext({"a": 3})) == 6


class TestRenderVv:
    """Tests for render_vv."""

    def test_render(self):
        """Test rendering several shorthand blocks."""
        assert render_vv("{a=}, {a + 1=}", a=3) == ["a = 3, a + 1 = 4"]

    def test_single_row_for_vectors(self):
        """Test that vector values do not broadcast."""
        assert render_vv("{x=}", x=[1, 2, 3]) == ["x = [1, 2, 3]"]


class TestVariableValueNa:
    """Tests for missing values in the shorthand."""

    def test_follows_render_na(self):
        """Test that missing values use the render call's NA marker."""
        assert render_vv("{x=}", x=[1, None], options={"na": "-"}) == ["x = [1, -]"]

    def test_explicit_na(self):
        """Test an explicit na on the transformer."""
        transformer = VariableValueTransformer(na="nil")
        assert transformer("x=", BindingContext({"x": None})) == "x = nil"
