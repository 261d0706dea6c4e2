import io
import os

import pytest

from pipex.pipeline import (
    PipexError,
    read_heredoc,
    run_here_doc,
    run_multiple,
    run_two,
)


@pytest.fixture
def env():
    return dict(os.environ)


def test_read_heredoc_stops_at_limiter():
    prompts = io.StringIO()
    body = read_heredoc(io.StringIO("one\ntwo\nEOF\nafter\n"), "EOF", prompts)
    assert body == b"one\ntwo\n"
    assert prompts.getvalue() == "> " * 3


def test_read_heredoc_requires_whole_line_match():
    body = read_heredoc(io.StringIO("EOFX\nEO\nEOF\n"), "EOF", io.StringIO())
    assert body == b"EOFX\nEO\n"


def test_read_heredoc_without_limiter_reads_everything():
    text = "alpha\nbeta\n"
    assert read_heredoc(io.StringIO(text), "END", io.StringIO()) == text.encode()


def test_read_heredoc_from_file_descriptor(tmp_path):
    source = tmp_path / "input"
    source.write_bytes(b"x\nSTOP\ny\n")
    fd = os.open(source, os.O_RDONLY)
    try:
        assert read_heredoc(fd, "STOP", io.StringIO()) == b"x\n"
    finally:
        os.close(fd)


def test_run_two_pipes_through_both(tmp_path, env):
    infile = tmp_path / "in"
    outfile = tmp_path / "out"
    infile.write_text("hello world\n")
    status = run_two(str(infile), "cat", "tr a-z A-Z", str(outfile), env)
    assert status == 0
    assert outfile.read_text() == "HELLO WORLD\n"


def test_run_two_missing_infile(tmp_path, env, capsys):
    infile = tmp_path / "missing"
    outfile = tmp_path / "out"
    status = run_two(str(infile), "cat", "cat", str(outfile), env)
    assert status == 0
    assert outfile.read_text() == ""
    assert str(infile) in capsys.readouterr().err


def test_run_two_unknown_second_command(tmp_path, env, capsys):
    infile = tmp_path / "in"
    infile.write_text("data\n")
    status = run_two(str(infile), "cat", "nosuchcmd_xyz", str(tmp_path / "out"), env)
    assert status == 127
    assert "nosuchcmd_xyz: command not found" in capsys.readouterr().out


def test_run_two_empty_command(tmp_path, env):
    infile = tmp_path / "in"
    infile.write_text("data\n")
    with pytest.raises(PipexError) as info:
        run_two(str(infile), "  ", "cat", str(tmp_path / "out"), env)
    assert info.value.status == 127


def test_run_two_without_path(tmp_path):
    infile = tmp_path / "in"
    infile.write_text("data\n")
    with pytest.raises(PipexError) as info:
        run_two(str(infile), "cat", "cat", str(tmp_path / "out"), {})
    assert info.value.status == 1


def test_run_multiple_truncates_and_chains(tmp_path, env):
    infile = tmp_path / "in"
    outfile = tmp_path / "out"
    infile.write_text("abc\n")
    outfile.write_text("stale content that must disappear\n")
    status = run_multiple(str(infile), ["cat", "tr a-z A-Z", "cat"], str(outfile), env)
    assert status == 0
    assert outfile.read_text() == "ABC\n"


def test_run_multiple_reports_last_status(tmp_path, env):
    infile = tmp_path / "in"
    infile.write_text("abc\n")
    status = run_multiple(str(infile), ["cat", "cat", "false"], str(tmp_path / "out"), env)
    assert status == 1


def test_run_multiple_empty_command(tmp_path, env):
    infile = tmp_path / "in"
    infile.write_text("abc\n")
    with pytest.raises(PipexError) as info:
        run_multiple(str(infile), ["cat", "", "cat"], str(tmp_path / "out"), env)
    assert info.value.status == 1


def test_run_multiple_requires_commands(tmp_path, env):
    with pytest.raises(ValueError):
        run_multiple(str(tmp_path / "in"), [], str(tmp_path / "out"), env)


def test_run_here_doc_appends(tmp_path, env, capsys):
    outfile = tmp_path / "out"
    outfile.write_text("old\n")
    stdin = io.StringIO("first\nsecond\nLIM\nignored\n")
    status = run_here_doc("LIM", ["cat", "tr a-z A-Z"], str(outfile), env, stdin)
    assert status == 0
    assert outfile.read_text() == "old\nFIRST\nSECOND\n"
    assert capsys.readouterr().out.startswith("> ")


def test_run_here_doc_unwritable_outfile(tmp_path, env):
    outfile = tmp_path / "no_such_dir" / "out"
    with pytest.raises(PipexError) as info:
        run_here_doc("LIM", ["cat", "cat"], str(outfile), env, io.StringIO("LIM\n"))
    assert info.value.status == 1