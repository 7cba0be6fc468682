"""Parsing of directive lines in data-driven test files."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import List, Tuple

_LOG = logging.getLogger(__name__)

_DIRECTIVE = re.compile(
    r"^ *[-a-zA-Z0-9/_,.]+(|=[-a-zA-Z0-9_@=+/,.]*|=\([^)]*\))( |\Z)"
)


class DirectiveError(ValueError):
    """A directive line or test file could not be parsed."""


@dataclass(repr=False)
class CmdArg:
    """One argument on a directive line.

    Forms: ``key``, ``key=``, ``key=()``, ``key=a``, ``key=a,b,c`` (one value)
    and ``key=(a,b,c)`` (several values).
    """

    key: str
    vals: List[str] = field(default_factory=list)

    def __str__(self) -> str:
        if not self.vals:
            return self.key
        if len(self.vals) == 1:
            return f"{self.key}={self.vals[0]}"
        return f"{self.key}=({','.join(self.vals)})"

    __repr__ = __str__


@dataclass
class TestData:
    """One test case parsed from a data-driven test file."""

    __test__ = False

    pos: str = ""
    """A ``file : Lline`` prefix for messages."""
    cmd: str = ""
    """The first word of the directive line."""
    cmd_args: List[CmdArg] = field(default_factory=list)
    input: str = ""
    """The text between the directive line and the ``----`` separator."""
    expected: str = ""
    """The text below the separator."""

    def contains_key(self, key: str) -> bool:
        """Whether an argument with the given key is present."""
        return any(arg.key == key for arg in self.cmd_args)


def split_directives(line: str) -> List[str]:
    """Split a directive line into its command and argument tokens."""
    fields = []
    rest = line
    while rest:
        match = _DIRECTIVE.match(rest)
        if match is None:
            column = len(line.encode("utf-8")) - len(rest.encode("utf-8")) + 1
            raise DirectiveError(f"cannot parse directive at column {column}: {line}")
        fields.append(rest[: match.end()].strip())
        rest = rest[match.end():]
    return fields


def parse_line(line: str) -> Tuple[str, List[CmdArg]]:
    """Parse a directive line into its command and arguments."""
    _LOG.debug("line passed to split_directives: %r", line)
    fields = split_directives(line)
    if not fields:
        return "", []
    _LOG.debug("arguments after split: %r", fields)

    cmd, *raw_args = fields
    args = []
    for raw in raw_args:
        key, sep, val = raw.partition("=")
        if not sep:
            args.append(CmdArg(key))
        elif val.startswith("(") and val.endswith(")"):
            args.append(CmdArg(key, [v.strip() for v in val[1:-1].split(",")]))
        else:
            args.append(CmdArg(key, [val]))
    return cmd, args