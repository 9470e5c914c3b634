
import configparser
from importlib import resources


def load_config() -> configparser.ConfigParser:

    config = configparser.ConfigParser(interpolation=None)
    ini_file = resources.files('tfljourneys') / 'resources' / 'config' / 'config.ini'
    config.read_string(ini_file.read_text(encoding='utf8'))

    return config
