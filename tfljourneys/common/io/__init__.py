"""
io contains the functions and classes used to load
journey history data
"""

from .ingestors import (
    CorpusConfig,
    FieldError,
    JourneyImportError,
    NoFilesFoundError,
    import_file,
    import_journey,
    journey_file_path,
    load_corpus
    )
