"""Tests for render options."""

import pytest
from pydantic import ValidationError

from strglue.global_models import BroadcastPolicy
from strglue.rendering.options import RenderOptions
from strglue.transformers.collapse import CollapseTransformer
from strglue.utils.config import ConfigSettings


class TestRenderOptions:
    """Tests for RenderOptions."""

    def test_defaults(self):
        """Test default option values."""
        options = RenderOptions()
        assert options.open_delimiter == "{"
        assert options.close_delimiter == "}"
        assert options.literal is False
        assert options.transformer is None
        assert options.na == "NA"
        assert options.sep == "\n"
        assert options.trim is True
        assert options.comment == "#"
        assert options.broadcast == BroadcastPolicy.RECYCLE

    def test_empty_delimiter_rejected(self):
        """Test that empty delimiters are invalid."""
        with pytest.raises(ValidationError):
            RenderOptions(open_delimiter="")

    def test_long_comment_rejected(self):
        """Test that the comment must be at most one character."""
        with pytest.raises(ValidationError):
            RenderOptions(comment="--")

    def test_empty_comment_allowed(self):
        """Test that comments can be disabled."""
        assert RenderOptions(comment="").comment == ""

    def test_non_callable_transformer_rejected(self):
        """Test that transformers must be callable or a name."""
        with pytest.raises(ValidationError):
            RenderOptions(transformer=42)

    def test_transformer_instance(self):
        """Test that transformer instances are kept as given."""
        transformer = CollapseTransformer()
        assert RenderOptions(transformer=transformer).transformer is transformer

    def test_broadcast_from_string(self):
        """Test that the policy accepts its string value."""
        assert RenderOptions(broadcast="strict").broadcast == BroadcastPolicy.STRICT

    def test_frozen(self):
        """Test that options are immutable."""
        options = RenderOptions()
        with pytest.raises(ValidationError):
            options.na = "x"


class TestCoerce:
    """Tests for RenderOptions.coerce."""

    def test_none(self):
        """Test that None gives defaults."""
        assert RenderOptions.coerce(None) == RenderOptions()

    def test_instance_returned(self):
        """Test that instances pass through."""
        options = RenderOptions(na="-")
        assert RenderOptions.coerce(options) is options

    def test_dict(self):
        """Test building options from a dict."""
        assert RenderOptions.coerce({"na": "-"}).na == "-"


class TestMerged:
    """Tests for RenderOptions.merged."""

    def test_overrides_applied(self):
        """Test that overrides replace values and others are kept."""
        options = RenderOptions(na="-", sep=" ")
        merged = options.merged(sep="")
        assert merged.na == "-"
        assert merged.sep == ""
        assert options.sep == " "

    def test_overrides_validated(self):
        """Test that merged values are validated."""
        with pytest.raises(ValidationError):
            RenderOptions().merged(close_delimiter="")


class TestFromConfig:
    """Tests for RenderOptions.from_config."""

    def test_unset_fields_use_defaults(self):
        """Test that unset configuration keeps defaults."""
        options = RenderOptions.from_config(ConfigSettings())
        assert options == RenderOptions()

    def test_config_values(self):
        """Test that configured values are used."""
        settings = ConfigSettings(open_delimiter="<<", close_delimiter=">>", na="")
        options = RenderOptions.from_config(settings)
        assert options.open_delimiter == "<<"
        assert options.close_delimiter == ">>"
        assert options.na == ""

    def test_overrides_win(self):
        """Test that explicit overrides beat configuration."""
        settings = ConfigSettings(na="missing")
        assert RenderOptions.from_config(settings, na="?").na == "?"

    def test_named_transformer(self):
        """Test a transformer configured by name."""
        settings = ConfigSettings(transformer="collapse")
        assert RenderOptions.from_config(settings).transformer == "collapse"
