"""Allow ``python -m torrentctl``."""

from __future__ import annotations

from torrentctl.cli.main import main

if __name__ == "__main__":
    main()
