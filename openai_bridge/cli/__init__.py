"""openai-bridge command line (package entrypoint).

Argument parsing lives in ``cli_parser`` and the handlers in ``cli_actions``;
this module only connects the two.

Public API re-exports:
- ``main``: CLI entrypoint callable
- ``plan_run``: dry-run planner used by tests
"""

from __future__ import annotations

import sys
from typing import Optional

from .cli_actions import handle_run, plan_run
from .cli_parser import build_parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entrypoint.

    Parameters
    ----------
    argv: Optional[list[str]]
        Argument vector; when ``None`` uses ``sys.argv[1:]``.

    Returns
    -------
    int
        Process exit code (0 success, 1 request or settings error, 2 missing
        credential).
    """
    args = build_parser().parse_args(list(sys.argv[1:] if argv is None else argv))
    return handle_run(args)


__all__ = ["main", "plan_run"]


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
