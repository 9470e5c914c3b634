"""

TFLJOURNEYS
===========

tfljourneys is a package for analysing personal TfL journey history.

Transport for London lets card holders download the journey history of an
oyster or contactless card as monthly csv exports. Each row is a
transaction at a card reader, or a journey made from a touch-in and a
touch-out. Bus journeys, top-ups and tube and train journeys are all mixed
together in the same file.

Tube and train journeys have a description naming both stations,

+-------------+------------+----------+------------------+
|  Date       | Start Time | End Time | Journey/Action   |
+=============+============+==========+==================+
| 01-Jan-2020 | 08:00      | 08:20    | Bank to Waterloo |
+-------------+------------+----------+------------------+

and a journey that was never touched out has "[No touch-out]" in place
of an end time.

tfljourneys joins the exports into one corpus, extracts the rail journeys
with their start and end stations, timestamps and durations and then
selects journeys between stations by pattern matching, eg

.. code-block:: python

    import tfljourneys

    corpus = tfljourneys.load_corpus('data', 'journeys')
    journeys = tfljourneys.extract_rail_journeys(corpus)
    to_work = tfljourneys.query_journeys(journeys, 'Bank', 'Waterloo', plot=True)

"""
from . import common
from . import preprocessing
from . import analysis

from .common.io import load_corpus, import_file
from .preprocessing import extract_rail_journeys
from .analysis import query_journeys, journey_duration_plot, analyze

__version__ = '0.1.0'
