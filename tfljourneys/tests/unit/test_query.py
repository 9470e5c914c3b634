# -*- coding: utf-8 -*-

import logging

import pandas as pd
import pytest

from tfljourneys.analysis import query
from tfljourneys.analysis.query import query_journeys
from tfljourneys.common.io.ingestors import FieldError
from tfljourneys.preprocessing.journeys import extract_rail_journeys


@pytest.fixture
def rail(mixed_journeys):
    return extract_rail_journeys(mixed_journeys)


def test_query_bank_waterloo(bank_waterloo):
    rail = extract_rail_journeys(bank_waterloo)
    result = query_journeys(rail, 'Bank', 'Waterloo')

    assert len(result) == 1
    assert result.iloc[0]['journey_action'] == 'Bank to Waterloo'
    assert result.iloc[0]['duration'] == 20


def test_query_regex(rail):
    result = query_journeys(rail, '^Bank', 'Waterloo|Stratford')

    assert result['journey_action'].tolist() == [
        'Bank to Waterloo', 'Bank DLR to Stratford'
        ]


def test_query_case_sensitive(rail):
    assert query_journeys(rail, 'bank', 'waterloo').empty


def test_query_idempotent(rail):
    first = query_journeys(rail, 'Bank', '')
    second = query_journeys(rail, 'Bank', '')

    pd.testing.assert_frame_equal(first, second)


def test_query_no_match(rail, caplog):
    with caplog.at_level(logging.WARNING):
        result = query_journeys(rail, 'Paddington', 'Bank')

    assert result.empty
    assert list(result.columns) == list(rail.columns)
    assert 'no journeys match' in caplog.text


def test_query_reports_stations(rail, caplog):
    with caplog.at_level(logging.INFO):
        query_journeys(rail, 'Bank', '')

    assert "'Bank', 'Bank DLR'" in caplog.text
    assert "'Waterloo', 'Stratford'" in caplog.text


def test_query_quiet(rail, caplog):
    with caplog.at_level(logging.INFO):
        query_journeys(rail, 'Bank', '', quiet=True)

    assert 'Results include' not in caplog.text


def test_query_plot(rail, monkeypatch):
    calls = []

    def fake_plot(journeydata, plottitle):
        calls.append((len(journeydata), plottitle))

    monkeypatch.setattr(query, 'journey_duration_plot', fake_plot)
    result = query_journeys(rail, 'Bank', 'Waterloo', plot=True)

    assert calls == [(len(result), 'Bank to Waterloo')]


def test_query_needs_stations(bank_waterloo):
    with pytest.raises(FieldError):
        query_journeys(bank_waterloo, 'Bank', 'Waterloo')
