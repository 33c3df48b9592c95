"""Allow running the demo with ``python -m mongo_arrays``"""
import sys

from .cli import main

sys.exit(main())
