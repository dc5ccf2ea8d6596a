"""Allow ``python -m chainboot``."""

from chainboot.main import main

main()
