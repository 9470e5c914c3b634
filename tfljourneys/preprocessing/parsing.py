"""
Parsing contains a class to parse command line arguments for
tfljourneys scripts. It defines allowable arguments and default
values
"""
from argparse import (
    ArgumentParser,
    RawTextHelpFormatter
    )
from typing import Dict, NamedTuple, Union, Any, Optional, Type

import pathlib


class ArgTuple(NamedTuple):

    short: str
    long: str
    help_: str
    required: bool
    type_: Union[Type[str], Type[bool], Type[pathlib.Path]]
    default: Any

class TableArgParser:

    ARGUMENTS = {
        'input_dir': ArgTuple(
           '-i',
           '--input_dir',
           'path to the directory of journey history csv files',
           False,
           pathlib.Path,
           None
           ),
        'pattern': ArgTuple(
           '-p',
           '--pattern',
           'the text that journey history filenames contain',
           False,
           str,
           None
           ),
        'start': ArgTuple(
           '-s',
           '--start',
           'pattern to match the start station(s)',
           False,
           str,
           None
           ),
        'end': ArgTuple(
           '-e',
           '--end',
           'pattern to match the end station(s)',
           False,
           str,
           None
           ),
        'output': ArgTuple(
           '-o',
           '--output',
           'path to write the selected journeys as csv',
           False,
           pathlib.Path,
           None
           ),
        'quiet': ArgTuple(
           '-q',
           '--quiet',
           'do not report the matched station names',
           False,
           bool,
           False
           ),
        'plot': ArgTuple(
           '-g',
           '--plot',
           'path to save a histogram of the journey durations',
           False,
           pathlib.Path,
           None
           )
        }

    def __init__(self, *args: str, description: Optional[str] = None) -> None:
        """
        A Basic argument parser for scripts in tfljourneys. Allows only a
        specific subset of arguments that make sense in this context.

        :param *args: The arguments allowed in the argparser
        :type *args: str
        :param description: A description of the argument, defaults to None
        :type description: Optional[str], optional
        :raises ValueError: if the given argument is not supported
        :return: ''
        :rtype: None

        """

        self.arglist = [x.lower() for x in args]

        odd_args = [x for x in self.arglist if x not in self.ARGUMENTS]
        if odd_args:
            raise ValueError(f"{odd_args} not supported")

        self.description = description

        self.parser = ArgumentParser(
            description=self.description,
            formatter_class=RawTextHelpFormatter
            )
        for arg in self.arglist:
            opt = self.ARGUMENTS[arg]
            if opt.type_ is bool:
                self.parser.add_argument(
                    opt.short, opt.long,
                    help=opt.help_,
                    action='store_true',
                    default=opt.default
                    )
                continue
            self.parser.add_argument(
                opt.short, opt.long,
                help=opt.help_,
                type=opt.type_,
                required=opt.required,
                default=opt.default
                )

    def parse(self, argv=None) -> Dict[str, Union[bool, pathlib.Path, str]]:
        """
        Parse the given arguments

        :param argv: the arguments to parse, defaults to sys.argv
        :return: dictionary of arguments and values
        :rtype: Dict[str, Union[bool, pathlib.Path, str]]

        """

        return vars(self.parser.parse_args(argv))
