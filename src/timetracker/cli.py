import sys
import logging
import argparse
import typing as tp

from pydantic import ValidationError
from textual.logging import TextualHandler

from .errors import ConfigError, DisplayInitError
from .settings import Settings
from .config import loadFile
from .actions import Engine
from .UI import UI

log = logging.getLogger(__name__)

USAGE = '''\
timetracker: a program to track time.
This program maintains multiple stopwatches to track time.
The timers are defined in a configuration file.

usage: timetracker [options]
options include:
-f [conf file]           The configuration file to use
-h                       Print this help message and quit
'''

class UsageError(Exception):
    pass

class ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> tp.NoReturn:
        raise UsageError(message)

def buildParser() -> ArgumentParser:
    parser = ArgumentParser(prog='timetracker', add_help=False)
    parser.add_argument('-f', dest='conf_file')
    parser.add_argument('-h', dest='help', action='store_true')
    return parser

def checkTerminal() -> None:
    if not (sys.stdin.isatty() and sys.stdout.isatty()):
        raise DisplayInitError('stdin and stdout must be a terminal')

def main(argv: tp.Sequence[str] | None = None) -> int:
    try:
        args = buildParser().parse_args(argv)
    except UsageError as e:
        print(e, file=sys.stderr)
        print(USAGE, end='')
        return 1
    if args.help:
        print(USAGE, end='')
        return 1
    if args.conf_file is None:
        print('You must specify a configuration file.', file=sys.stderr)
        print(USAGE, end='')
        return 1

    try:
        settings = Settings.fromEnv()
    except ValidationError as e:
        print(f'invalid settings: {e}', file=sys.stderr)
        return 1
    logging.basicConfig(level=settings.log_level, handlers=[TextualHandler()])

    try:
        timer_set = loadFile(args.conf_file, settings)
    except ConfigError as e:
        log.debug('Config load failed', exc_info=True)
        print(f'error initializing timetrackers: {e}', file=sys.stderr)
        return 1

    try:
        checkTerminal()
    except DisplayInitError as e:
        print(f'error initializing the display: {e}', file=sys.stderr)
        return 1
    
    ui = UI(Engine(timer_set), settings)
    ui.run()
    return ui.return_code or 0

def run() -> None:
    sys.exit(main())
