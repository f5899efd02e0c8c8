"""
grit: string-list utilities for command-line tooling.
"""

__version__ = "0.1.0"
