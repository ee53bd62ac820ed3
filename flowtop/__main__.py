"""Allow ``python -m flowtop``."""

from flowtop.cli import main

main()
