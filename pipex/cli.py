"""Command-line entry point: pipe a file through shell-free commands."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pipex.fmt import printf
from pipex.pipeline import PipexError, run_here_doc, run_multiple, run_two


def _usage() -> int:
    printf("Usage:\n")
    printf("./pipex infile cmd1 cmd2 outfile\n")
    printf("./pipex here_doc LIMITER cmd1 ... outfile\n")
    return 1


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the pipeline described by ``argv`` and return the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) >= 5 and args[0] == "here_doc":
            return run_here_doc(args[1], args[2:-1], args[-1])
        if len(args) == 4:
            return run_two(args[0], args[1], args[2], args[3])
        if len(args) > 4:
            return run_multiple(args[0], args[1:-1], args[-1])
    except PipexError as exc:
        sys.stderr.write(f"pipex: {exc}\n")
        return exc.status
    return _usage()


if __name__ == "__main__":
    sys.exit(main())