"""Shared enums used across strglue modules."""

from enum import Enum


class BroadcastPolicy(str, Enum):
    """How mismatched vector lengths are handled during rendering."""

    RECYCLE = "recycle"
    STRICT = "strict"


class ShellType(str, Enum):
    """Shell quoting convention for the shell transformer."""

    SH = "sh"
    CSH = "csh"
    CMD = "cmd"
    CMD2 = "cmd2"
