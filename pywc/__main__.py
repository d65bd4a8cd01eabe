"""Entry point for `python -m pywc`."""
import sys

from pywc.cli import main

sys.exit(main())
