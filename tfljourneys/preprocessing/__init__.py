"""
The preprocessing subpackage extracts the tube and train journeys
from a journey corpus and parses command line arguments for the
tfljourneys scripts.
"""

from .journeys import extract_rail_journeys, ClassificationError
from . import parsing
