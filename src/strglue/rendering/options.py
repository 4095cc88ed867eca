"""Options controlling a render call."""

from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from strglue.global_models import BroadcastPolicy
from strglue.utils.config import ConfigSettings


class RenderOptions(BaseModel):
    """Settings for one render call.

    ``transformer`` may be a callable ``(text, context) -> value``, a
    Transformer instance, a registered transformer name, or None for plain
    Python evaluation.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    open_delimiter: str = Field("{", description="String opening an expression block")
    close_delimiter: str = Field("}", description="String closing an expression block")
    literal: bool = Field(
        False, description="Treat quotes and comments inside blocks as plain text"
    )
    transformer: Optional[Any] = Field(
        None, description="Transformer callable, instance or registry name"
    )
    na: str = Field("NA", description="Text rendered for None and NaN values")
    sep: str = Field("\n", description="Separator used to join template parts")
    trim: bool = Field(True, description="Trim blank boundary lines and indentation")
    comment: str = Field("#", description="Comment character inside blocks")
    broadcast: BroadcastPolicy = Field(
        BroadcastPolicy.RECYCLE, description="Handling of mismatched vector lengths"
    )

    @field_validator("open_delimiter", "close_delimiter")
    @classmethod
    def _check_delimiter(cls, value: str) -> str:
        if not value:
            raise ValueError("Delimiters must be non-empty")
        return value

    @field_validator("comment")
    @classmethod
    def _check_comment(cls, value: str) -> str:
        if len(value) > 1:
            raise ValueError("Comment must be a single character or empty")
        return value

    @field_validator("transformer")
    @classmethod
    def _check_transformer(cls, value: Any) -> Any:
        if value is None or isinstance(value, str) or callable(value):
            return value
        raise ValueError(
            f"Transformer must be callable or a registered name, got {type(value).__name__}"
        )

    @classmethod
    def coerce(
        cls, options: Optional[Union["RenderOptions", Dict[str, Any]]]
    ) -> "RenderOptions":
        """Return ``options`` as RenderOptions, building them from a dict if needed."""
        if options is None:
            return cls()
        if isinstance(options, RenderOptions):
            return options
        return cls(**options)

    @classmethod
    def from_config(cls, settings: ConfigSettings, **overrides: Any) -> "RenderOptions":
        """Build options from loaded configuration.

        Unset configuration fields keep their defaults; ``overrides`` win
        over both.

        Example:
            >>> settings = ConfigSettings(open_delimiter="<<", close_delimiter=">>")
            >>> RenderOptions.from_config(settings).open_delimiter
            '<<'
        """
        values: Dict[str, Any] = {}
        for field in (
            "open_delimiter",
            "close_delimiter",
            "literal",
            "transformer",
            "na",
            "sep",
            "trim",
            "comment",
            "broadcast",
        ):
            value = getattr(settings, field)
            if value is not None:
                values[field] = value
        values.update(overrides)
        return cls(**values)

    def merged(self, **overrides: Any) -> "RenderOptions":
        """Return a validated copy with ``overrides`` applied."""
        values = {name: getattr(self, name) for name in type(self).model_fields}
        values.update(overrides)
        return RenderOptions(**values)
