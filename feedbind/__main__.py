"""Allow ``python -m feedbind``."""

from feedbind.cli import main

if __name__ == "__main__":
    main()
