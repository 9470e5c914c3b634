"""
Extract the tube and train journeys from a journey corpus

Rail journeys are identified by the presence of the delimiter " to "
in the journey description, eg 'Bank to Waterloo'. Bus journeys and
top-ups do not name a start and end station.

NB: incomplete journeys, with "[No touch-out]" in place of an end time,
are kept. Their end timestamp and duration are null.
"""
import ast
import logging
import re
from typing import Optional, Sequence

import numpy as np  # type: ignore
import pandas as pd  # type: ignore

from tfljourneys.common.io.ingestors import FieldError
from tfljourneys.resources.config import load_config

log = logging.getLogger(__name__)

CONFIG = load_config()

DELIMITER = ast.literal_eval(CONFIG['journeys']['delimiter'])
TIME_FORMAT = ast.literal_eval(CONFIG['journeys']['time_format'])
SENTINELS = tuple(ast.literal_eval(CONFIG['journeys']['sentinels']))

REQUIRED = ('journey_action', 'date', 'start_time', 'end_time')


class ClassificationError(ValueError):
    "error for a rail journey description that cannot be split into two stations"
    def __init__(self, descriptions: Sequence[str]) -> None:
        self.descriptions = list(descriptions)
        super().__init__(
            "journey descriptions must name exactly one start and one end "
            f"station: {', '.join(map(repr, self.descriptions))}"
            )


def _check_fields(table: pd.DataFrame) -> None:
    for col in REQUIRED:
        if col not in table.columns:
            raise FieldError(col)


def split_stations(
        actions: pd.Series,
        strict: bool = True
        ) -> pd.DataFrame:
    """
    Split journey descriptions into start and end stations

    :param actions: journey descriptions that contain the delimiter
    :type actions: pd.Series
    :param strict: raise on ambiguous descriptions, defaults to True
    :type strict: bool, optional
    :raises ClassificationError: in strict mode, if a description contains
        the delimiter more than once or names an empty station
    :return: a frame of start_station and end_station with the same index
    :rtype: pd.DataFrame

    """

    stations = actions.str.split(DELIMITER, n=1, expand=True, regex=False)
    if stations.shape[1] != 2:
        # only possible for an empty series
        stations = pd.DataFrame(index=actions.index, columns=[0, 1], dtype=object)
    stations.columns = ['start_station', 'end_station']

    if strict:
        bad = (
            (actions.str.count(re.escape(DELIMITER)) != 1) |
            (stations['start_station'].str.strip() == '') |
            (stations['end_station'].str.strip() == '')
            )
        if bad.any():
            raise ClassificationError(actions[bad].unique())

    return stations


def _null_sentinels(times: pd.Series) -> pd.Series:
    """'[No touch-out]' and friends are missing times, not times"""
    times = times.astype('string').str.strip()
    return times.mask(times.isin(SENTINELS))


def journey_timestamps(
        dates: pd.Series,
        times: pd.Series,
        time_format: Optional[str] = None
        ) -> pd.Series:
    """
    Combine a date column and a time column into timestamps

    Sentinel times are nulled first, anything else that does
    not parse is also returned as NaT.

    :param dates: dates as text, eg '01-Jan-2020'
    :type dates: pd.Series
    :param times: times as text, eg '08:20'
    :type times: pd.Series
    :param time_format: the strptime format of 'date time', defaults to
        the configured '%d-%b-%Y %H:%M'
    :type time_format: Optional[str], optional
    :return: timestamps
    :rtype: pd.Series

    """

    time_format = TIME_FORMAT if time_format is None else time_format

    stamps = dates.astype('string').str.strip() + ' ' + _null_sentinels(times)
    parsed = pd.to_datetime(stamps, format=time_format, errors='coerce')

    n_failed = int((stamps.notna() & parsed.isna()).sum())
    if n_failed:
        log.debug(f"{n_failed} timestamps could not be parsed")

    return parsed


def extract_rail_journeys(
        table: pd.DataFrame,
        strict: bool = True
        ) -> pd.DataFrame:
    """
    Extract the tube and train journeys and add station and time columns

    Adds start_station, end_station, start_timestamp, end_timestamp and
    duration (in minutes) to a copy of the rail journey rows.

    :param table: the journey corpus, eg an output from load_corpus
    :type table: pd.DataFrame
    :param strict: raise ClassificationError for descriptions that do not
        split into exactly two stations, defaults to True. If False the
        description is split at the first delimiter.
    :type strict: bool, optional
    :raises FieldError: if a required column is missing
    :return: only the rail journeys, with the derived columns
    :rtype: pd.DataFrame

    """
    _check_fields(table)

    is_rail = table['journey_action'].astype('string').str.contains(
        DELIMITER, regex=False
        ).fillna(False).astype(bool)
    rail = table.loc[is_rail].copy()

    stations = split_stations(
        rail['journey_action'].astype(str), strict=strict
        )
    rail['start_station'] = stations['start_station']
    rail['end_station'] = stations['end_station']

    rail['start_timestamp'] = journey_timestamps(rail['date'], rail['start_time'])
    rail['end_timestamp'] = journey_timestamps(rail['date'], rail['end_time'])

    elapsed = rail['end_timestamp'] - rail['start_timestamp']
    rail['duration'] = elapsed.dt.total_seconds().astype(np.float64) / 60

    log.info(
        f"found {len(rail)} rail journeys in {len(table)} records, "
        f"{int(rail['end_timestamp'].isna().sum())} without an end time"
        )
    return rail
