"""Pytest configuration and fixtures for the chat responder and grade tracker tests."""

import io
import os

# Must be set before config is imported anywhere: no log file, no console logging.
os.environ["CHAT_GRADER_LOG_FILE"] = ""
os.environ["CHAT_GRADER_DEBUG"] = "0"

import pytest


class FirstChoice:
    """Random source that always picks the first option."""

    def __init__(self):
        self.calls = []

    def choice(self, options):
        self.calls.append(tuple(options))
        return options[0]


@pytest.fixture
def first_choice():
    return FirstChoice()


@pytest.fixture
def recording_console(monkeypatch):
    """Replaces the CLI console with one that writes plain text to a buffer.

    Usage:
        def test_something(recording_console):
            cli.display_success("done")
            assert "done" in recording_console.file.getvalue()
    """
    import ui.cli as cli

    console = cli.make_console(file=io.StringIO(), width=120, force_terminal=False, color_system=None)
    monkeypatch.setattr(cli, "console", console)
    return console


@pytest.fixture
def scripted_input(monkeypatch):
    """Feeds prepared lines to input(); raises EOFError once they run out.

    Usage:
        def test_something(scripted_input):
            scripted_input("1", "Alice")
    """
    lines = []

    def fake_input(*args):
        if not lines:
            raise EOFError
        return lines.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)

    def feed(*new_lines):
        lines.extend(new_lines)
        return lines

    return feed
