"""Allow ``python -m hinter``."""

from hinter.cli import main

main()
