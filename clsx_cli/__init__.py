"""
clsx CLI - build class lists from the command line
"""

from clsx_core import __version__

__all__ = ["__version__"]
