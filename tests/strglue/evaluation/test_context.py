"""Tests for BindingContext."""

import pytest

from strglue.evaluation.context import BindingContext


class FakeFrame:
    """Minimal data-frame-like object exposing keys() and __getitem__."""

    def __init__(self, columns):
        self._columns = columns

    def keys(self):
        return list(self._columns)

    def __getitem__(self, key):
        return self._columns[key]


class TestLayerPriority:
    """Tests for lookup order across layers."""

    def test_named_override_scopes(self):
        """Test that named arguments win over scopes."""
        context = BindingContext({"name": "scope"}, names={"name": "named"})
        assert context["name"] == "named"

    def test_data_between_named_and_scopes(self):
        """Test that data columns override scopes but not named arguments."""
        context = BindingContext(
            {"a": "scope", "b": "scope"},
            data={"a": ["data"], "b": ["data"]},
            names={"b": "named"},
        )
        assert context["a"] == ["data"]
        assert context["b"] == "named"

    def test_scopes_in_order(self):
        """Test that earlier scopes shadow later ones (locals before globals)."""
        context = BindingContext({"x": "local"}, {"x": "global", "y": "global"})
        assert context["x"] == "local"
        assert context["y"] == "global"

    def test_missing_name(self):
        """Test that missing names raise KeyError."""
        with pytest.raises(KeyError):
            BindingContext()["missing"]

    def test_mapping_protocol(self):
        """Test len, iteration and membership."""
        context = BindingContext({"a": 1}, names={"b": 2})
        assert set(context) == {"a", "b"}
        assert len(context) == 2
        assert "a" in context
        assert context.get("c", 3) == 3


class TestDataLayer:
    """Tests for data layer conversion."""

    def test_data_frame_like(self):
        """Test objects with keys() and __getitem__."""
        frame = FakeFrame({"hp": [110, 93]})
        context = BindingContext(data=frame)
        assert context["hp"] == [110, 93]

    def test_invalid_data(self):
        """Test that unsupported data raises TypeError."""
        with pytest.raises(TypeError):
            BindingContext(data=[1, 2, 3])


class TestDerivedContexts:
    """Tests for bind, with_data, freeze and namespace."""

    def test_bind_does_not_mutate(self):
        """Test that bind returns a new context."""
        base = BindingContext(names={"a": 1})
        bound = base.bind(b=2)
        assert "b" not in base
        assert bound["a"] == 1
        assert bound["b"] == 2

    def test_with_data(self):
        """Test replacing the data layer."""
        context = BindingContext({"x": 0}).with_data({"x": [1, 2]})
        assert context["x"] == [1, 2]

    def test_freeze_is_snapshot(self):
        """Test that later changes to caller scopes are not visible."""
        scope = {"x": 1}
        frozen = BindingContext(scope).freeze()
        scope["x"] = 2
        scope["y"] = 3
        assert frozen["x"] == 1
        assert "y" not in frozen

    def test_namespace_is_fresh_copy(self):
        """Test that namespace changes do not leak into the context."""
        context = BindingContext({"x": 1})
        namespace = context.namespace()
        namespace["x"] = 99
        assert context["x"] == 1
        assert "__builtins__" in namespace

    def test_coerce(self):
        """Test coercion of None, mappings and contexts."""
        context = BindingContext()
        assert BindingContext.coerce(context) is context
        assert BindingContext.coerce({"a": 1})["a"] == 1
        assert len(BindingContext.coerce(None)) == 0
        with pytest.raises(TypeError):
            BindingContext.coerce(["a"])
