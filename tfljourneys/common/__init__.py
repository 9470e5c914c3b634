"""
The common subpackage groups classes and functions that are used throughout
the tfljourneys package
"""

from . import io
