"""
# JTS: __main__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Entry point for `python -m jts`.
"""

from jts.cli import main

main()
