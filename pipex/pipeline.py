"""Running commands as a pipeline between an input file and an output file."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
import tempfile
from collections.abc import Mapping, Sequence
from contextlib import ExitStack
from typing import Any, Optional, TextIO, Union

from pipex.fmt import printf
from pipex.lines import LineReader
from pipex.paths import CommandNotFoundError, find_cmd_path, parse_command, parse_paths

_Stage = Union[subprocess.Popen, int]

_TRUNCATE = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_APPEND = os.O_WRONLY | os.O_CREAT | os.O_APPEND


class PipexError(Exception):
    """A failure that stops the whole pipeline, with the exit status to use."""

    def __init__(self, message: str, status: int = 1) -> None:
        super().__init__(message)
        self.status = status


def _report(label: str, exc: OSError) -> None:
    sys.stderr.write(f"{label}: {exc.strerror or exc}\n")
    sys.stderr.flush()


def _open_fd(path: str, flags: int, stack: ExitStack) -> Optional[int]:
    try:
        fd = os.open(path, flags, 0o644)
    except OSError as exc:
        _report(path, exc)
        return None
    stack.callback(os.close, fd)
    return fd


def _parse_all(commands: Sequence[str], status: int) -> list[list[str]]:
    try:
        return [parse_command(command) for command in commands]
    except CommandNotFoundError:
        raise PipexError("command not found", status) from None


def _search_paths(env: Mapping[str, str]) -> list[str]:
    try:
        return parse_paths(env)
    except LookupError as exc:
        raise PipexError(str(exc.args[0]), 1) from None


def _launch(
    argv: list[str],
    paths: list[str],
    env: Mapping[str, str],
    stdin: Optional[int],
    stdout: Optional[int],
    *,
    check_command_first: bool,
    redirect_error: str,
) -> _Stage:
    redirect_ok = stdin is not None and stdout is not None
    if not check_command_first and not redirect_ok:
        sys.stderr.write(f"{redirect_error}: {os.strerror(errno.EBADF)}\n")
        return 1
    cmd_path = find_cmd_path(argv[0], paths)
    if cmd_path is None:
        printf("%s: command not found\n", argv[0])
        return 127
    if not redirect_ok:
        sys.stderr.write(f"{redirect_error}: {os.strerror(errno.EBADF)}\n")
        return 1
    try:
        return subprocess.Popen(
            argv, executable=cmd_path, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        _report("execve", exc)
        return 1


def _wait(stage: _Stage) -> int:
    if isinstance(stage, int):
        return stage
    return stage.wait()


def _environment(env: Optional[Mapping[str, str]]) -> Mapping[str, str]:
    return os.environ if env is None else env


def read_heredoc(stream: Any, limiter: str, prompt_stream: Optional[TextIO] = None) -> bytes:
    """Read lines from ``stream`` until a line equal to ``limiter``; return the rest."""
    prompt = sys.stdout if prompt_stream is None else prompt_stream
    marker = os.fsencode(limiter) + b"\n"
    reader = LineReader(stream)
    collected = []
    while True:
        prompt.write("> ")
        prompt.flush()
        line = reader.readline()
        if line is None:
            break
        data = line.encode() if isinstance(line, str) else line
        if data == marker:
            break
        collected.append(data)
    return b"".join(collected)


def run_two(
    infile: str,
    cmd1: str,
    cmd2: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Run ``cmd1 < infile | cmd2 > outfile`` and return the second command's status."""
    env = _environment(env)
    with ExitStack() as stack:
        in_fd = _open_fd(infile, os.O_RDONLY, stack)
        out_fd = _open_fd(outfile, _TRUNCATE, stack)
        first_argv, second_argv = _parse_all([cmd1, cmd2], 127)
        paths = _search_paths(env)
        read_end, write_end = os.pipe()
        try:
            first = _launch(
                first_argv, paths, env, in_fd, write_end,
                check_command_first=True, redirect_error="pipex: input redirection",
            )
            second = _launch(
                second_argv, paths, env, read_end, out_fd,
                check_command_first=True, redirect_error="pipex: output redirection",
            )
        finally:
            os.close(read_end)
            os.close(write_end)
        _wait(first)
        code = _wait(second)
    # A command killed by a signal has no exit code of its own.
    return code if code >= 0 else 0


def _run_chain(
    in_fd: Optional[int],
    out_fd: Optional[int],
    commands: Sequence[str],
    env: Mapping[str, str],
) -> int:
    argvs = _parse_all(commands, 1)
    paths = _search_paths(env)
    stages: list[_Stage] = []
    previous = in_fd
    try:
        for index, argv in enumerate(argvs):
            last = index == len(argvs) - 1
            if last:
                next_read, write_end = None, out_fd
            else:
                next_read, write_end = os.pipe()
            try:
                stages.append(_launch(
                    argv, paths, env, previous, write_end,
                    check_command_first=False, redirect_error="dup2 error",
                ))
            finally:
                if previous is not None and previous != in_fd:
                    os.close(previous)
                if not last:
                    os.close(write_end)
            previous = next_read
    finally:
        if previous is not None and previous != in_fd:
            os.close(previous)
    codes = [_wait(stage) for stage in stages]
    return codes[-1] if codes[-1] >= 0 else 1


def run_multiple(
    infile: str,
    commands: Sequence[str],
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Pipe ``infile`` through every command into ``outfile``; return the last status."""
    if not commands:
        raise ValueError("at least one command is required")
    with ExitStack() as stack:
        in_fd = _open_fd(infile, os.O_RDONLY, stack)
        out_fd = _open_fd(outfile, _TRUNCATE, stack)
        return _run_chain(in_fd, out_fd, commands, _environment(env))


def _default_stdin() -> Any:
    try:
        return sys.stdin.fileno()
    except (OSError, ValueError, AttributeError):
        return sys.stdin


def run_here_doc(
    limiter: str,
    commands: Sequence[str],
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
    stdin: Any = None,
) -> int:
    """Feed lines up to ``limiter`` through the commands, appending to ``outfile``."""
    if not commands:
        raise ValueError("at least one command is required")
    source = _default_stdin() if stdin is None else stdin
    body = read_heredoc(source, limiter)
    with ExitStack() as stack:
        document = stack.enter_context(tempfile.TemporaryFile())
        document.write(body)
        document.flush()
        document.seek(0)
        try:
            out_fd = os.open(outfile, _APPEND, 0o644)
        except OSError as exc:
            raise PipexError(f"here_doc open: {exc.strerror or exc}", 1) from None
        stack.callback(os.close, out_fd)
        return _run_chain(document.fileno(), out_fd, commands, _environment(env))