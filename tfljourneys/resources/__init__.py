"""
The resources subpackage contains the packaged configuration
required for tfljourneys to function.

The default corpus folder, filename pattern, journey delimiter,
time sentinels and plot settings all live in config/config.ini
"""
from . import config
