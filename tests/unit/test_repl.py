"""Tests for the interactive loop in tranclator/repl.py."""

import pytest
from unittest.mock import MagicMock, patch

from tranclator.config import Language
from tranclator.repl import PROMPT, format_quit_keywords, run_repl

SPANISH = Language(name="spanish", lower_mode="preserve",
                   dictionary={"hello": "hola", "world": "mundo"})


def _feed(*lines):
    """Build an input function returning lines, then raising EOFError."""
    remaining = list(lines)
    prompts = []

    def _input(prompt):
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    _input.prompts = prompts
    return _input


def _run(*lines, quit_keywords=(":q",), clipboard=None):
    out = []
    run_repl(SPANISH, clipboard, quit_keywords, input_fn=_feed(*lines), output=out.append)
    return out


class TestFormatQuitKeywords:

    def test_quoted_and_sorted(self):
        assert format_quit_keywords({"exit", ":q"}) == '":q", "exit"'

    def test_empty(self):
        assert format_quit_keywords([]) == ""


class TestRunRepl:

    def test_banner(self):
        out = _run(":q", quit_keywords=["exit", ":q"])
        assert out == ["Welcome to spanish REPL", 'Type any of ":q", "exit" to exit']

    def test_translates_until_quit(self):
        out = _run("Hello world", "HELLO WORLD", ":q", "never read")
        assert out[2:] == ["Hola mundo", "HOLA MUNDO"]

    def test_quit_keyword_is_stripped(self):
        out = _run("  :q  \n", "hello")
        assert out[2:] == []

    def test_substring_does_not_quit(self):
        out = _run("say :q now", ":q")
        assert out[2:] == ["say :q now"]

    def test_quit_is_case_sensitive(self):
        out = _run("EXIT", "exit", quit_keywords=["exit"])
        assert out[2:] == ["EXIT"]

    def test_empty_input_translated(self):
        out = _run("", "   ", ":q")
        assert out[2:] == ["", ""]

    def test_eof_ends_loop(self):
        out = _run("hello")
        assert out[2:] == ["hola", ""]

    def test_prompt(self):
        input_fn = _feed(":q")
        run_repl(SPANISH, None, [":q"], input_fn=input_fn, output=lambda s: None)
        assert input_fn.prompts == [PROMPT]

    def test_no_quit_keywords(self):
        out = _run("hello", quit_keywords=())
        assert out[1] == "Type any of  to exit"
        assert out[2] == "hola"

    def test_clipboard_receives_each_translation(self):
        clipboard = MagicMock()
        _run("hello", "world", ":q", clipboard=clipboard)
        assert [c.args[0] for c in clipboard.set_text.call_args_list] == ["hola", "mundo"]
        clipboard.hold.assert_not_called()

    def test_clipboard_error_propagates(self):
        clipboard = MagicMock()
        clipboard.set_text.side_effect = RuntimeError("no clipboard")
        with pytest.raises(RuntimeError):
            _run("hello", ":q", clipboard=clipboard)

    def test_defaults_to_builtin_input_and_print(self, capsys):
        with patch("builtins.input", side_effect=["hello world", ":q"]):
            run_repl(SPANISH, quit_keywords=[":q"])
        assert "hola mundo" in capsys.readouterr().out.splitlines()
