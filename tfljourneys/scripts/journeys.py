"""
Command line script to select tube and train journeys
from TfL journey history exports

usage:
    python -m tfljourneys.scripts.journeys -i data -s Bank -e Waterloo -g bank.png

Without a start and end pattern all rail journeys are selected.
"""
import logging
from typing import List, Optional

import matplotlib
matplotlib.use('Agg')

from tfljourneys.analysis.plotting import journey_duration_plot
from tfljourneys.analysis.query import query_journeys
from tfljourneys.common.io.ingestors import CorpusConfig, load_corpus
from tfljourneys.preprocessing.journeys import extract_rail_journeys
from tfljourneys.preprocessing.parsing import TableArgParser

log = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> None:

    parser = TableArgParser(
        'input_dir', 'pattern', 'start', 'end', 'output', 'quiet', 'plot',
        description='Select tube and train journeys between stations'
        )
    args = parser.parse(argv)

    logging.basicConfig(
        level=logging.WARNING if args['quiet'] else logging.INFO,
        format='%(asctime)s %(name)s %(levelname)s: %(message)s'
        )

    config = CorpusConfig.from_config()
    corpus = load_corpus(
        folder=args['input_dir'],
        pattern=args['pattern'],
        config=config
        )
    journeys = extract_rail_journeys(corpus)

    start = args['start'] or ''
    end = args['end'] or ''
    selected = query_journeys(journeys, start, end, quiet=args['quiet'])

    if args['plot'] is not None:
        journey_duration_plot(
            selected,
            plottitle=f"{start or 'Anywhere'} to {end or 'Anywhere'}",
            filename=args['plot']
            )

    if args['output'] is not None:
        selected.to_csv(args['output'], index=False)
        log.info(f"wrote {len(selected)} journeys to {args['output']}")
    else:
        print(selected[
            ['date', 'start_station', 'end_station', 'duration']
            ].to_string(index=False))


if __name__ == "__main__":
    main()
