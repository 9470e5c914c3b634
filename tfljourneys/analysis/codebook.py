"""
The process for analysing TfL travel history data
"""
from typing import Optional

import pandas as pd  # type: ignore

from tfljourneys.common.io.ingestors import CorpusConfig, load_corpus
from tfljourneys.preprocessing.journeys import extract_rail_journeys


def analyze(config: Optional[CorpusConfig] = None) -> pd.DataFrame:
    """extract the tube and train journeys from all available data files"""
    return extract_rail_journeys(load_corpus(config=config))
