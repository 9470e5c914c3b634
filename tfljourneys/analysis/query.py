"""
Select the journeys between stations by pattern matching on the
start and end station names
"""
import logging

import pandas as pd  # type: ignore

from tfljourneys.analysis.plotting import journey_duration_plot
from tfljourneys.common.io.ingestors import FieldError

log = logging.getLogger(__name__)


def _matches(stations: pd.Series, pattern: str) -> pd.Series:
    return stations.astype('string').str.contains(
        pattern, regex=True, case=True
        ).fillna(False).astype(bool)


def query_journeys(
        table: pd.DataFrame,
        start_pattern: str,
        end_pattern: str,
        quiet: bool = False,
        plot: bool = False
        ) -> pd.DataFrame:
    """
    Select the journeys whose start and end stations match the given patterns

    NB: incomplete journeys are included, they have a null duration
        and are left out of the duration plot

    :param table: the rail journeys, eg an output from extract_rail_journeys.
        Must have start_station and end_station columns
    :type table: pd.DataFrame
    :param start_pattern: regular expression to match the start station(s)
    :type start_pattern: str
    :param end_pattern: regular expression to match the end station(s)
    :type end_pattern: str
    :param quiet: do not log the matched station names, defaults to False
    :type quiet: bool, optional
    :param plot: plot a histogram of the journey durations, defaults to False
    :type plot: bool, optional
    :raises FieldError: if the station columns are missing
    :return: the matching journeys. Empty if nothing matches
    :rtype: pd.DataFrame

    """
    for col in ('start_station', 'end_station'):
        if col not in table.columns:
            raise FieldError(col)

    selected = (
        _matches(table['start_station'], start_pattern) &
        _matches(table['end_station'], end_pattern)
        )
    outputdata = table.loc[selected].copy()

    if outputdata.empty:
        log.warning(
            f"no journeys match '{start_pattern}' to '{end_pattern}'"
            )

    if not quiet:
        log.info(
            "Results include all journeys starting at any of the following: %s",
            list(outputdata['start_station'].unique())
            )
        log.info(
            "and ending at any of the following: %s",
            list(outputdata['end_station'].unique())
            )

    if plot:
        journey_duration_plot(
            outputdata, plottitle=f"{start_pattern} to {end_pattern}"
            )

    return outputdata
