"""Convenience shim to run the fork manager without installing it."""

from __future__ import annotations

import sys

from fork_manager.pipeline.runner import main


if __name__ == "__main__":
    sys.exit(main())
