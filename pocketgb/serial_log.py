"""Log of the bytes sent over the serial port."""

from __future__ import annotations

import time
from typing import Callable, Iterator, List, Optional, Tuple


def _parse_filter(pattern: str) -> Tuple[List[str], List[str]]:
    includes: List[str] = []
    excludes: List[str] = []
    for term in pattern.split(","):
        term = term.strip().lower()
        if not term:
            continue
        if term.startswith("-"):
            if term[1:]:
                excludes.append(term[1:])
        else:
            includes.append(term)
    return includes, excludes


def _passes(line: str, includes: List[str], excludes: List[str]) -> bool:
    lowered = line.lower()
    if any(term in lowered for term in excludes):
        return False
    if not includes:
        return True
    return any(term in lowered for term in includes)


class SerialLog:
    """Collects serial data into timestamped text lines.

    In text mode bytes are gathered until a newline; in raw mode every
    byte is logged as a hex value. ``clock`` returns the current time in
    seconds and defaults to the time elapsed since the log was created.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None) -> None:
        if clock is None:
            start = time.monotonic()
            clock = lambda: time.monotonic() - start  # noqa: E731
        self._clock = clock
        self.auto_scroll = True
        self.raw_output = False
        self._text = ""
        self._serial_buf = bytearray()

    @property
    def text(self) -> str:
        """The whole log as written."""
        return self._text

    def clear(self) -> None:
        """Drop every logged line."""
        self._text = ""

    def add_log(self, text: str) -> None:
        """Append text to the log; newlines split it into lines."""
        self._text += text

    def lines(self, pattern: Optional[str] = None) -> Iterator[str]:
        """Yield logged lines, optionally filtered.

        The pattern is a comma separated list of case-insensitive terms: a
        line passes if it contains any plain term (or there are none) and
        none of the terms prefixed with "-".
        """
        parts = self._text.split("\n")
        if parts[-1] == "":
            parts.pop()
        includes, excludes = _parse_filter(pattern or "")
        for line in parts:
            if _passes(line, includes, excludes):
                yield line

    def _log_line(self, body: str) -> None:
        self.add_log(f"[{self._clock():1.0f}] - {body}\n")

    def on_serial_data(self, data: int) -> None:
        """Handle one byte received from the serial port."""
        data &= 0xFF
        if self.raw_output:
            if self._serial_buf:
                self._log_line(self._serial_buf.decode("latin-1"))
                self._serial_buf.clear()
            self._log_line(f"0x{data:02x}")
        elif data == ord("\n"):
            self._log_line(self._serial_buf.decode("latin-1"))
            self._serial_buf.clear()
        else:
            self._serial_buf.append(data)