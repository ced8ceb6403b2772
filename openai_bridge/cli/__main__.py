"""CLI package executable module.

Allows running the CLI via:

    python -m openai_bridge.cli "Hello" --model gpt-4o-mini --execute

This module simply forwards to ``main`` defined in the package.
"""

from __future__ import annotations

from . import main


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
