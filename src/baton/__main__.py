"""Allow ``python -m baton``."""

from baton.launcher import main

if __name__ == "__main__":
    raise SystemExit(main())
