# place for fixtures: ie setup for tests

from pathlib import Path

import matplotlib
matplotlib.use('Agg')

import pandas as pd
import pytest


HERE = Path(__file__).parent

JANUARY = """Date,Start Time,End Time,Journey/Action,Charge,Credit,Balance,Note
01-Jan-2020,08:00,08:20,Bank to Waterloo,2.40,,17.60,
01-Jan-2020,09:00,[No touch-out],Waterloo to Bank,8.00,,9.60,
01-Jan-2020,12:15,,"Bus journey, route 76",1.50,,8.10,
01-Jan-2020,13:00,,Topped up,,20.00,28.10,
"""

FEBRUARY = """Date,Start.Time,End.Time,Journey.Action,Charge
03-Feb-2020,07:58,08:25,Bank to Waterloo,2.40
03-Feb-2020,18:02,18:31,Waterloo to Bank,2.40
01-Jan-2020,08:00,08:20,Bank to Waterloo,2.40
"""


def write_csv(folder: Path, name: str, text: str) -> Path:
    fp = folder / name
    fp.write_text(text, encoding='utf-8')
    return fp


@pytest.fixture
def data_dir(tmp_path):
    d = tmp_path / 'data'
    d.mkdir()
    write_csv(d, '202001-journeys.csv', JANUARY)
    write_csv(d, '202002-journeys.csv', FEBRUARY)
    write_csv(d, 'notes.txt', 'not a journey file')
    write_csv(d, '202002-payments.csv', 'Date,Amount\n03-Feb-2020,10\n')
    return d


@pytest.fixture
def bank_waterloo():
    return pd.DataFrame({
        'date': ['01-Jan-2020', '01-Jan-2020'],
        'start_time': ['08:00', '09:00'],
        'end_time': ['08:20', '[No touch-out]'],
        'journey_action': ['Bank to Waterloo', 'Waterloo to Bank'],
        })


@pytest.fixture
def mixed_journeys(bank_waterloo):
    other = pd.DataFrame({
        'date': ['02-Jan-2020', '02-Jan-2020', '02-Jan-2020'],
        'start_time': ['10:00', '11:00', '17:45'],
        'end_time': [None, None, '18:30'],
        'journey_action': [
            'Bus journey, route 76', 'Topped up', 'Bank DLR to Stratford'
            ],
        })
    return pd.concat([bank_waterloo, other], ignore_index=True)
