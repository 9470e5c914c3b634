"""
Functions to read TfL journey history csv exports

Each monthly export downloaded from the TfL contactless and oyster
account pages is a csv file with a header row. The exports are read
individually and then joined into a single corpus DataFrame.
"""
import logging
import re
from dataclasses import dataclass, replace
from fnmatch import fnmatchcase
from pathlib import Path
from typing import List, Optional, Union

import pandas as pd  # type: ignore
from tqdm import tqdm

from tfljourneys.resources.config import load_config

log = logging.getLogger(__name__)

CONFIG = load_config()


class JourneyImportError(ImportError):
    "error for a journey file that cannot be read"
    pass

class NoFilesFoundError(FileNotFoundError):
    "error for a folder with no journey files in it"
    pass

class FieldError(KeyError):
    "error for missing field in journey data"
    def __init__(self, column_name: str) -> None:
        self.column_name = column_name
        super().__init__(
            f"journey data does not contain the '{column_name}' column"
            )


@dataclass(frozen=True)
class CorpusConfig:
    """
    Where to find the journey history files and how to join them

    :param folder: the directory to scan for journey files
    :type folder: Path
    :param pattern: the text a filename must contain, before the .csv suffix
    :type pattern: str
    :param encoding: the encoding of the csv files
    :type encoding: str
    :param drop_duplicates: join rows that match in all shared columns, defaults to True
    :type drop_duplicates: bool
    :param progress: show a progress bar while importing, defaults to False
    :type progress: bool
    """

    folder: Path
    pattern: str
    encoding: str = 'utf-8'
    drop_duplicates: bool = True
    progress: bool = False

    @classmethod
    def from_config(cls) -> 'CorpusConfig':
        """create a CorpusConfig from the package config.ini"""
        section = CONFIG['corpus']
        return cls(
            folder=Path(section['folder']),
            pattern=section['pattern'],
            encoding=section.get('encoding', 'utf-8'),
            drop_duplicates=section.getboolean('drop_duplicates', True),
            progress=section.getboolean('progress', False)
            )

    @property
    def glob(self) -> str:
        return f'*{self.pattern}*.csv'


def _normalise_column(name: str) -> str:
    """'Journey/Action' and 'Journey.Action' both become 'journey_action'"""
    return re.sub(r'[^0-9a-z]+', '_', name.strip().lower()).strip('_')


def import_file(
        path: Union[str, Path],
        encoding: str = 'utf-8'
        ) -> pd.DataFrame:
    """
    Read a single journey history csv file

    The first line of the file gives the column names. Column types
    are inferred by pandas and no index column is taken from the file.

    :param path: the path to the csv file
    :type path: Union[str, Path]
    :param encoding: the file encoding, defaults to 'utf-8'
    :type encoding: str, optional
    :raises JourneyImportError: if the file is missing, unreadable or
        cannot be parsed
    :return: the file contents with snake_case column names
    :rtype: pd.DataFrame

    """

    try:
        frame = pd.read_csv(path, index_col=False, encoding=encoding)
    except (OSError, UnicodeDecodeError,
            pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        raise JourneyImportError(f"could not import {path}: {e}") from e

    frame.columns = [_normalise_column(str(x)) for x in frame.columns]
    return frame


def journey_file_path(
        monthcode: str,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None
        ) -> Path:
    """the conventional path of a monthly export, eg data/202001-journeys.csv"""
    section = CONFIG['monthly']
    prefix = section['prefix'] if prefix is None else prefix
    suffix = section['suffix'] if suffix is None else suffix

    return Path(f'{prefix}{monthcode}{suffix}')


def import_journey(
        monthcode: str,
        prefix: Optional[str] = None,
        suffix: Optional[str] = None
        ) -> pd.DataFrame:
    """import the monthly export for the given monthcode"""
    filename = journey_file_path(monthcode, prefix, suffix)
    log.info(f"importing {filename}")

    return import_file(filename)


def find_journey_files(config: CorpusConfig) -> List[Path]:
    """
    Find the journey files in the configured folder

    :param config: the corpus configuration
    :type config: CorpusConfig
    :raises NoFilesFoundError: if the folder does not exist or contains
        no matching files
    :return: the matching file paths, sorted by name
    :rtype: List[Path]

    """
    folder = Path(config.folder)
    if not folder.is_dir():
        raise NoFilesFoundError(f"{folder} is not a directory")

    files = sorted(
        x for x in folder.iterdir() if
        x.is_file() and fnmatchcase(x.name, config.glob)
        )
    if not files:
        raise NoFilesFoundError(
            f"There are no files matching {config.glob} in {folder}"
            )
    return files


def drop_shared_duplicates(
        corpus: pd.DataFrame,
        shared: List[str]
        ) -> pd.DataFrame:
    """
    Collapse rows that are identical in the columns all files share

    The first row of each duplicate group keeps its position, its null
    cells are filled from the later duplicates, eg a note column that
    only one of the exports has.

    :param corpus: the stacked journey files
    :type corpus: pd.DataFrame
    :param shared: the columns common to every file
    :type shared: List[str]
    :return: the corpus without duplicates
    :rtype: pd.DataFrame

    """
    if not shared or corpus.empty:
        return corpus

    key = corpus.groupby(shared, sort=False, dropna=False).ngroup()
    deduped = corpus.groupby(key, sort=False).first()

    return deduped[list(corpus.columns)].reset_index(drop=True)


def load_corpus(
        folder: Optional[Union[str, Path]] = None,
        pattern: Optional[str] = None,
        config: Optional[CorpusConfig] = None
        ) -> pd.DataFrame:
    """
    Import all of the journey files in a folder and join them together

    Rows are stacked in file order. The columns are the union of the
    columns of all files, a row from a file without a column gets a
    null value there. Rows that match in every column the files share
    are joined into one.

    :param folder: the folder to scan, overrides config.folder
    :type folder: Optional[Union[str, Path]], optional
    :param pattern: the filename pattern, overrides config.pattern
    :type pattern: Optional[str], optional
    :param config: the corpus configuration, defaults to the package config
    :type config: Optional[CorpusConfig], optional
    :raises NoFilesFoundError: if no files match
    :raises JourneyImportError: if any file cannot be imported
    :return: the joined journey corpus
    :rtype: pd.DataFrame

    """

    if config is None:
        config = CorpusConfig.from_config()
    if folder is not None:
        config = replace(config, folder=Path(folder))
    if pattern is not None:
        config = replace(config, pattern=pattern)

    files = find_journey_files(config)
    log.info(
        "Preparing to import: %s", ', '.join(str(x) for x in files)
        )

    frames = [
        import_file(x, encoding=config.encoding) for x in
        tqdm(files, desc='importing journeys', disable=not config.progress)
        ]

    corpus = pd.concat(frames, join='outer', ignore_index=True, sort=False)
    if config.drop_duplicates:
        shared = [
            x for x in corpus.columns if all(x in f.columns for f in frames)
            ]
        n_rows = len(corpus)
        corpus = drop_shared_duplicates(corpus, shared)
        n_dropped = n_rows - len(corpus)
        if n_dropped:
            log.info(f"dropped {n_dropped} duplicate journey rows")

    return corpus
