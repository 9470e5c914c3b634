"""
The analysis subpackage selects journeys between stations
and plots their durations
"""

from .query import query_journeys
from .plotting import journey_duration_plot
from .codebook import analyze
