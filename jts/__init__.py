"""
# JTS: __init__.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

JTS (Japanese TypeScript): run TypeScript written with Japanese keywords.
"""
