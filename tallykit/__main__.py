"""Run the tallykit CLI with ``python -m tallykit``."""
from .cli import main

main()
