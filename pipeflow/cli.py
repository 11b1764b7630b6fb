"""Command-line entry point: run ``infile cmd1 ... cmdN outfile`` as a pipeline."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from pipeflow.config import UsageError, parse_arguments
from pipeflow.output import put_str
from pipeflow.runner import run_pipeline


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the arguments, run the pipeline and return its exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        pipeline = parse_arguments(args)
    except UsageError:
        put_str("[Pipex] Error: invalid nb of arguments\n", sys.stderr)
        return 1
    return run_pipeline(pipeline)


if __name__ == "__main__":
    sys.exit(main())