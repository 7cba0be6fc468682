"""Running data-driven test files against a handler function."""

from __future__ import annotations

import difflib
import logging
import os
import re
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Union

from .parser import DirectiveError, TestData, parse_line

_LOG = logging.getLogger(__name__)

_BLANK_LINE = re.compile(r"^[\t ]*\n", re.MULTILINE)

Handler = Callable[[TestData], str]
PathLike = Union[str, "os.PathLike[str]"]


class ExpectationMismatch(AssertionError):
    """The handler's output differs from the expected output of a case."""

    def __init__(self, pos: str, expected: str, actual: str):
        self.pos = pos
        self.expected = expected
        self.actual = actual
        diff = "".join(
            difflib.unified_diff(
                expected.splitlines(keepends=True),
                actual.splitlines(keepends=True),
                fromfile="expected",
                tofile="actual",
            )
        )
        super().__init__(f"{pos}: output differs from expected\n{diff}")


def has_blank_line(text: str) -> bool:
    """Whether the text holds a line made only of spaces and tabs."""
    return _BLANK_LINE.search(text) is not None


def dirs_or_file(path: PathLike) -> List[Path]:
    """The entries of a directory, or the path itself if it is not one."""
    p = Path(path)
    if p.is_dir():
        return sorted(p.iterdir())
    return [p]


def _lines(content: str) -> List[str]:
    parts = content.split("\n")
    if parts and parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


class _Reader:
    """Reads test cases out of file content, optionally recording a rewrite."""

    def __init__(self, source_name: PathLike, content: str, rewrite: bool):
        self._source_name = str(source_name)
        self._scanner = iter(enumerate(_lines(content)))
        self.rewrite_buffer: Optional[List[str]] = [] if rewrite else None

    def emit(self, text: str) -> None:
        if self.rewrite_buffer is not None:
            self.rewrite_buffer.append(text + "\n")

    def _next_line(self) -> Optional[str]:
        item = next(self._scanner, None)
        return None if item is None else item[1]

    def _require_line(self) -> str:
        line = self._next_line()
        if line is None:
            raise DirectiveError(
                f"{self._source_name}: unterminated double ---- separator section"
            )
        return line

    def directives(self) -> Iterator[TestData]:
        while True:
            item = next(self._scanner, None)
            if item is None:
                return
            pos, raw = item
            self.emit(raw)
            line = raw.strip()
            if not line or line.startswith("#"):
                continue

            while line.endswith("\\"):
                line = line[:-1]
                continuation = self._next_line()
                if continuation is None:
                    raise DirectiveError("expect argument ends without '\\'")
                self.emit(continuation)
                continuation = continuation.strip()
                if continuation:
                    line += " " + continuation
                pos += 1

            _LOG.debug("argument after cleanup: %s", line)
            data = TestData(pos=f"{self._source_name} : L{pos + 1}")
            cmd, cmd_args = parse_line(line)
            if not cmd:
                raise DirectiveError("cmd must not be empty")
            data.cmd = cmd
            data.cmd_args = cmd_args

            input_lines = []
            separator = False
            while (text := self._next_line()) is not None:
                if text == "----":
                    separator = True
                    break
                self.emit(text)
                input_lines.append(text + "\n")
            data.input = "".join(input_lines).strip()

            if separator:
                data.expected = self._read_expected()
            yield data

    def _read_expected(self) -> str:
        first = self._next_line()
        if first == "----":
            expected = []
            while True:
                line = self._require_line()
                if line == "----":
                    line2 = self._require_line()
                    if line2 == "----":
                        line3 = self._next_line()
                        if line3 is not None and line3 != "":
                            raise DirectiveError(
                                "non-blank line after end of double ---- separator section"
                            )
                        return "".join(expected)
                    expected.append(line + "\n")
                    expected.append(line2 + "\n")
                    continue
                expected.append(line + "\n")

        expected = []
        line = first
        while line is not None and line.strip():
            expected.append(line + "\n")
            line = self._next_line()
        return "".join(expected)


def _run_directive(reader: _Reader, data: TestData, func: Handler) -> None:
    actual = func(data)
    if actual and not actual.endswith("\n"):
        actual += "\n"

    if reader.rewrite_buffer is None:
        if actual != data.expected:
            raise ExpectationMismatch(data.pos, data.expected, actual)
        return

    reader.emit("----")
    if has_blank_line(actual):
        reader.emit("----")
        reader.rewrite_buffer.append(actual)
        reader.emit("----")
        reader.emit("----")
        reader.emit("")
    else:
        reader.emit(actual)


def run_directives(
    source_name: PathLike, content: str, func: Handler, rewrite: bool = False
) -> Optional[str]:
    """Run every case in ``content`` through ``func``.

    In test mode each output is compared with the expected text and
    ExpectationMismatch is raised on a difference; None is returned. In
    rewrite mode the file content with fresh expected outputs is returned.
    """
    reader = _Reader(source_name, content, rewrite)
    for data in reader.directives():
        _run_directive(reader, data, func)

    if reader.rewrite_buffer is None:
        return None
    result = "".join(reader.rewrite_buffer)
    if result.endswith("\n\n"):
        result = result[:-1]
    _LOG.debug("rewrite buffer: %r", result)
    return result


def run_test(path: PathLike, func: Handler, rewrite: bool = False) -> None:
    """Run the test file at ``path``, or every file in that directory.

    In rewrite mode each file is overwritten with the actual outputs.
    """
    for file in dirs_or_file(path):
        with open(file, encoding="utf-8", newline="") as handle:
            content = handle.read()
        rewritten = run_directives(file, content, func, rewrite)
        if rewritten is not None:
            with open(file, "w", encoding="utf-8", newline="") as handle:
                handle.write(rewritten)
                handle.flush()
                os.fsync(handle.fileno())


def walk(path: PathLike, func: Callable[[Path], None]) -> None:
    """Call ``func`` for the file at ``path`` or for each entry of that directory."""
    for file in dirs_or_file(path):
        func(file)