"""Tests for mkdo.execution.executors.console."""

from __future__ import annotations

import pytest

from mkdo.core.models import Code
from mkdo.execution.executors import ConsoleExecutor, Executor
from mkdo.execution.executors.console import prompted_commands, with_arguments


class TestPromptedCommands:
    def test_leading_prompted_lines(self):
        assert prompted_commands("$ echo a\n$ echo b") == ["echo a", "echo b"]

    def test_stops_at_first_unprompted_line(self):
        assert prompted_commands("$ echo a\noutput\n$ echo b") == ["echo a"]

    def test_unprompted_first_line_runs_nothing(self):
        assert prompted_commands("output\n$ echo a") == []

    def test_prompt_needs_trailing_space(self):
        assert prompted_commands("$echo a") == []

    def test_first_continuation_joined(self):
        assert prompted_commands("$ echo a \\\nb\n$ echo c") == ["echo a b", "echo c"]

    def test_only_first_continuation_joined(self):
        assert prompted_commands("$ echo a \\\nb \\\nc") == ["echo a b \\"]


class TestWithArguments:
    def test_no_args(self):
        assert with_arguments("ls", ()) == "ls"

    def test_args_quoted(self):
        assert with_arguments("echo", ("a b", "$HOME")) == "echo 'a b' '$HOME'"


class TestConsoleExecutor:
    def test_protocol(self):
        executor = ConsoleExecutor()
        assert isinstance(executor, Executor)
        assert executor.name == "console"

    @pytest.mark.asyncio
    async def test_runs_each_line(self, recorder, tmp_path):
        value = "$ echo one > out.txt\n$ echo two >> out.txt"
        assert await ConsoleExecutor().run(Code("console", value), recorder.context(tmp_path)) == 0
        assert (tmp_path / "out.txt").read_text() == "one\ntwo\n"
        assert recorder.logs == ["$ echo one > out.txt", "$ echo two >> out.txt"]

    @pytest.mark.asyncio
    async def test_args_appended_to_each_line(self, recorder, tmp_path):
        value = "$ echo >> out.txt\n$ echo >> out.txt"
        ctx = recorder.context(tmp_path, ("x y",))
        assert await ConsoleExecutor().run(Code("console", value), ctx) == 0
        assert (tmp_path / "out.txt").read_text() == "x y\nx y\n"

    @pytest.mark.asyncio
    async def test_stops_on_failure(self, recorder, tmp_path):
        value = "$ exit 3\n$ touch never.txt"
        assert await ConsoleExecutor().run(Code("console", value), recorder.context(tmp_path)) == 3
        assert not (tmp_path / "never.txt").exists()

    @pytest.mark.asyncio
    async def test_transcript_output_not_run(self, recorder, tmp_path):
        value = "$ true\ntouch never.txt"
        assert await ConsoleExecutor().run(Code("console", value), recorder.context(tmp_path)) == 0
        assert not (tmp_path / "never.txt").exists()
