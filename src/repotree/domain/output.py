from __future__ import annotations

from typing import Protocol


class OutputSink(Protocol):
    """
    Display area of the tree client.

    Each write replaces the shown content. `transient` marks placeholder
    states (loading) that a sink may route or discard separately.
    """

    def write(self, text: str, *, transient: bool = False) -> None:
        ...
