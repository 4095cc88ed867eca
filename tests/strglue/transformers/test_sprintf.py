"""Tests for printf-style format specs."""

import math

import pytest

from strglue.errors import EvalError
from strglue.evaluation.context import BindingContext
from strglue.transformers.sprintf import SprintfTransformer, split_format_spec


class TestSplitFormatSpec:
    """Tests for split_format_spec."""

    def test_split(self):
        """Test splitting at the top-level colon."""
        assert split_format_spec("pi:.3f") == ("pi", ".3f")

    def test_no_spec(self):
        """Test text without a colon."""
        assert split_format_spec("pi") == ("pi", None)

    def test_slice_not_split(self):
        """Test that slice colons are not format separators."""
        assert split_format_spec("x[1:2]") == ("x[1:2]", None)

    def test_last_colon_wins(self):
        """Test that the last top-level colon is used."""
        assert split_format_spec("{'a': 1}['a']:5d") == ("{'a': 1}['a']", "5d")


class TestSprintfTransformer:
    """Tests for SprintfTransformer."""

    def test_float_format(self):
        """Test a float precision spec."""
        context = BindingContext({"pi": math.pi})
        assert SprintfTransformer()("pi:.3f", context) == ["3.142"]

    def test_vector_format(self):
        """Test that each element is formatted."""
        context = BindingContext({"x": [1, 22]})
        assert SprintfTransformer()("x:03d", context) == ["001", "022"]

    def test_percent_prefix_accepted(self):
        """Test that a spec may include the leading '%'."""
        assert SprintfTransformer()("7:%x", BindingContext()) == ["7"]
        assert SprintfTransformer()("255:%x", BindingContext()) == ["ff"]

    def test_string_format(self):
        """Test string width formatting."""
        assert SprintfTransformer()("'ab':4s", BindingContext()) == ["  ab"]
        assert SprintfTransformer()("'ab':-4s", BindingContext()) == ["ab  "]

    def test_without_spec(self):
        """Test that blocks without a spec evaluate normally."""
        assert SprintfTransformer()("1 + 1", BindingContext()) == 2

    def test_bad_spec(self):
        """Test that an incompatible spec raises EvalError."""
        with pytest.raises(EvalError):
            SprintfTransformer()("'text':d", BindingContext())
