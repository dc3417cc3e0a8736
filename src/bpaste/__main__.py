"""Allow ``python -m bpaste``."""

from bpaste.presentation.cli.app import main

if __name__ == "__main__":
    main()
