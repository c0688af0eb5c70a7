from __future__ import annotations

"""Unit tests for the output sinks."""

import io

from repotree.interface.output import ConsoleOutput, TextOutput


def test_text_output_replaces_content() -> None:
    out = TextOutput()
    out.write("Loading...", transient=True)
    out.write("📄 a.txt\n")

    assert out.text == "📄 a.txt\n"
    assert out.history == ["Loading...", "📄 a.txt\n"]


def test_console_output_routes_transient_states() -> None:
    stream, status = io.StringIO(), io.StringIO()
    out = ConsoleOutput(stream, status)

    out.write("Loading...", transient=True)
    out.write("📁 root\n  📄 f\n")
    out.write("Error: Gagal mengambil data")

    assert status.getvalue() == "Loading...\n"
    assert stream.getvalue() == "📁 root\n  📄 f\nError: Gagal mengambil data\n"
