"""Allow running as ``python -m anything_cli``."""

from anything_cli.main import main

main()
