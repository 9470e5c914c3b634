# -*- coding: utf-8 -*-

import numpy as np
import pandas as pd
import pytest
import matplotlib.pyplot as plt

from tfljourneys.analysis.plotting import duration_bins, journey_duration_plot


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close('all')


@pytest.mark.parametrize('maximum, last_edge',
    [
        (20, 22),
        (21, 22),
        (21.9, 22),
        (0, 2)
        ]
    )
def test_duration_bins(maximum, last_edge):
    bins = duration_bins(pd.Series([0, maximum]), 2)

    assert bins[0] == 0
    assert bins[-1] == last_edge
    assert (np.diff(bins) == 2).all()


def test_duration_plot():
    journeys = pd.DataFrame({'duration': [20.0, 21.5, np.nan, 25.0]})
    ax = journey_duration_plot(journeys, plottitle='Bank to Waterloo')

    assert ax.get_title() == 'Bank to Waterloo'
    assert ax.get_xlabel() == 'Minutes'
    heights = [p.get_height() for p in ax.patches]
    assert sum(heights) == 3
    assert len(heights) == 13


def test_duration_plot_saves(tmp_path):
    journeys = pd.DataFrame({'duration': [20.0, 30.0]})
    fp = tmp_path / 'durations.png'
    journey_duration_plot(journeys, filename=fp)

    assert fp.exists()


def test_duration_plot_nothing_to_plot():
    journeys = pd.DataFrame({'duration': [np.nan]})

    assert journey_duration_plot(journeys) is None
