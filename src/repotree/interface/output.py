from __future__ import annotations

"""
Output Sinks.

The display area of the tree client. Each write replaces the shown content.
Writes flagged as transient (the loading placeholder) may be routed
separately by sinks that cannot erase what they already emitted.
"""

import sys
from typing import List, Optional, TextIO

from repotree.domain.output import OutputSink

__all__ = ["OutputSink", "TextOutput", "ConsoleOutput"]


class TextOutput:
    """In-memory sink that remembers the current text and every state shown."""

    def __init__(self) -> None:
        self.text: str = ""
        self.history: List[str] = []

    def write(self, text: str, *, transient: bool = False) -> None:
        self.text = text
        self.history.append(text)


class ConsoleOutput:
    """
    Terminal sink.

    Final states go to `stream` (stdout by default) so the rendered tree can
    be piped; transient states go to `status_stream` (stderr by default).
    """

    def __init__(self, stream: Optional[TextIO] = None, status_stream: Optional[TextIO] = None):
        self._stream = stream
        self._status_stream = status_stream

    def write(self, text: str, *, transient: bool = False) -> None:
        if transient:
            target = self._status_stream or sys.stderr
        else:
            target = self._stream or sys.stdout
        target.write(text if text.endswith("\n") else text + "\n")
        target.flush()
