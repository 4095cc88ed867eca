"""Render defaults read from a ``strglue.toml`` file.

The ``[strglue]`` table holds the same keys as RenderOptions plus the SQL
dialect used by ``render_query``::

    [strglue]
    open_delimiter = "<<"
    close_delimiter = ">>"
    na = ""
    dialect = "postgres"
"""

import tomllib
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ValidationError
from rich.console import Console

from strglue.global_models import BroadcastPolicy

CONFIG_FILENAME = "strglue.toml"

console = Console(stderr=True)


class ConfigSettings(BaseModel):
    """Settings from the ``[strglue]`` table.

    A None field was not set in the file and leaves the built-in default
    in place. Unknown keys are ignored.
    """

    open_delimiter: Optional[str] = None
    close_delimiter: Optional[str] = None
    literal: Optional[bool] = None
    transformer: Optional[str] = None
    na: Optional[str] = None
    sep: Optional[str] = None
    trim: Optional[bool] = None
    comment: Optional[str] = None
    broadcast: Optional[BroadcastPolicy] = None
    dialect: Optional[str] = None


def find_config_file(directory: Optional[Path] = None) -> Optional[Path]:
    """Return ``directory/strglue.toml`` if it is a file, else None.

    ``directory`` defaults to the working directory.
    """
    candidate = (directory or Path.cwd()) / CONFIG_FILENAME
    return candidate if candidate.is_file() else None


def _fall_back(message: str) -> ConfigSettings:
    console.print(f"[yellow]Warning:[/yellow] {message}")
    console.print("[yellow]Using default settings[/yellow]")
    return ConfigSettings()


def load_config(config_path: Optional[Path] = None) -> ConfigSettings:
    """Load render defaults from ``config_path`` or the working directory.

    A missing file gives empty settings. A file that cannot be read or
    parsed, or that holds values of the wrong type, is reported on stderr
    and also gives empty settings, so a broken config never stops a render.
    """
    path = config_path or find_config_file()
    if path is None:
        return ConfigSettings()

    try:
        with open(path, "rb") as f:
            table = tomllib.load(f).get("strglue", {})
        if not isinstance(table, dict):
            return _fall_back(f"'strglue' in {path} must be a table")
        return ConfigSettings(**table)
    except FileNotFoundError:
        return ConfigSettings()
    except tomllib.TOMLDecodeError as e:
        return _fall_back(f"Failed to parse {path}: {e}")
    except ValidationError as e:
        return _fall_back(f"Invalid configuration in {path}: {e}")
    except OSError as e:
        return _fall_back(f"Could not read {path}: {e}")
