"""Allow running the CLI with ``python -m drn``."""

from drn.cli.cli import main

if __name__ == "__main__":
    main()
