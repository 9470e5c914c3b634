"""
Histograms of journey durations
"""
import logging
from pathlib import Path
from typing import Optional, Union

import matplotlib.pyplot as plt  # type: ignore
import numpy as np  # type: ignore
import pandas as pd  # type: ignore

from tfljourneys.resources.config import load_config

log = logging.getLogger(__name__)

CONFIG = load_config()


def duration_bins(durations: pd.Series, width: int) -> np.ndarray:
    """bin edges from 0 up to max + width, in steps of width"""
    upper = max(int(durations.max()), 0) + width
    return np.arange(0, upper + 1, width)


def journey_duration_plot(
        journeydata: pd.DataFrame,
        plottitle: str = "Selected journeys",
        ax: Optional[plt.Axes] = None,
        filename: Optional[Union[str, Path]] = None
        ) -> Optional[plt.Axes]:
    """
    Plot a histogram of the journey durations in whole minutes

    :param journeydata: journeys with a duration column in minutes
    :type journeydata: pd.DataFrame
    :param plottitle: the title of the plot, defaults to "Selected journeys"
    :type plottitle: str, optional
    :param ax: the axes to draw on, defaults to a new figure
    :type ax: Optional[plt.Axes], optional
    :param filename: save the figure to this file, defaults to None
    :type filename: Optional[Union[str, Path]], optional
    :return: the axes of the histogram, None if there are no durations
    :rtype: Optional[plt.Axes]

    """
    section = CONFIG['plot']
    width = section.getint('bin_width', 2)

    durations = journeydata['duration'].dropna()
    if durations.empty:
        log.warning(f"no journey durations to plot for {plottitle}")
        return None

    # truncate to whole minutes
    durations = durations.astype(np.int64)

    if ax is None:
        _, ax = plt.subplots()

    ax.hist(
        durations,
        bins=duration_bins(durations, width),
        color=section.get('color', 'red')
        )
    ax.set_xlabel(section.get('xlabel', 'Minutes'))
    ax.set_title(plottitle)

    if filename is not None:
        ax.figure.savefig(filename)
        log.info(f"saved duration plot to {filename}")

    return ax
