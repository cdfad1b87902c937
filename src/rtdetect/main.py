#!python
import argparse
import json
import logging
import platform
import sys
import time
from typing import Dict, List, Optional

from . import __version__
from . import config as _config
from . import util as _util
from .constants import EXIT_OK, SUBCOMMAND, float_fraction
from .detect import main as detect_main
from .schemas import DEFAULTS, validate_config
from .util import filepath


def create_parser(argv):
    parser = argparse.ArgumentParser(formatter_class=_config.CustomHelpFormatter)
    parser.add_argument(
        '-v',
        '--version',
        action='version',
        version='%(prog)s version ' + __version__,
        help='Outputs the version number',
    )
    subp = parser.add_subparsers(
        dest='command', help='specifies which step/stage in the pipeline or which subprogram to use'
    )
    subp.required = True
    required = {}  # hold required argument group by subparser command name
    optional = {}  # hold optional argument group by subparser command name
    for command in SUBCOMMAND.values():
        subparser = subp.add_parser(
            command, formatter_class=_config.CustomHelpFormatter, add_help=False
        )
        required[command] = subparser.add_argument_group('required arguments')
        optional[command] = subparser.add_argument_group('optional arguments')
        optional[command].add_argument(
            '-h', '--help', action='help', help='show this help message and exit'
        )
        optional[command].add_argument(
            '-v',
            '--version',
            action='version',
            version='%(prog)s version ' + __version__,
            help='Outputs the version number',
        )
        optional[command].add_argument('--log', help='redirect stdout to a log file', default=None)
        optional[command].add_argument(
            '--log_level',
            help='level of logging to output',
            choices=['INFO', 'DEBUG'],
            default='INFO',
        )

    # detect
    required[SUBCOMMAND.DETECT].add_argument(
        '--config', '-c', help='path to the JSON config file', type=filepath, required=True
    )
    required[SUBCOMMAND.DETECT].add_argument(
        '-n',
        '--inputs',
        nargs='+',
        help='path to the input breakend files',
        required=True,
        metavar='FILEPATH',
    )
    required[SUBCOMMAND.DETECT].add_argument(
        '-o', '--output', help='path to the output directory', required=True
    )

    # setup
    required[SUBCOMMAND.SETUP].add_argument(
        '--outputfile', '-o', required=True, help='path to the outputfile', metavar='FILEPATH'
    )
    optional[SUBCOMMAND.SETUP].add_argument(
        '--annotations',
        nargs='+',
        default=[],
        help='path to the reference exon tables',
        metavar='FILEPATH',
    )
    optional[SUBCOMMAND.SETUP].add_argument(
        '--maxgap',
        type=int,
        help='maximum distance between a breakend and an exon boundary (detect.maxgap)',
    )
    optional[SUBCOMMAND.SETUP].add_argument(
        '--minscore',
        type=float_fraction,
        help='minimum proportion of observed exon-exon junctions (detect.minscore)',
    )
    return parser, parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """
    sets up the parser and checks the validity of command line args
    loads the config and redirects into subcommand main functions

    Args:
        argv: List of arguments, defaults to command line arguments
    """
    if argv is None:  # need to do at run time or patching will not behave as expected
        argv = sys.argv[1:]
    start_time = int(time.time())
    parser, args = create_parser(argv)

    log_conf = {
        'format': '{asctime} [{levelname}] {message}',
        'style': '{',
        'level': args.log_level,
    }

    original_logging_handlers = logging.root.handlers[:]
    for handler in logging.root.handlers:
        logging.root.removeHandler(handler)
    if args.log:  # redirect stdout AND stderr to a log file
        log_conf['filename'] = args.log
    logging.basicConfig(**log_conf)

    _util.logger.info(f'RTDETECT: {__version__}')
    _util.logger.info(f'hostname: {platform.node()}')
    _util.log_arguments(args)

    try:
        if args.command == SUBCOMMAND.DETECT:
            with open(args.config, 'r') as fh:
                config: Dict = json.load(fh)
            validate_config(config)
            try:
                args.inputs = _util.bash_expands(*args.inputs)
            except FileNotFoundError:
                parser.error(f'--inputs file(s) for {args.command} {args.inputs} do not exist')
            detect_main.main(
                inputs=args.inputs,
                output=args.output,
                config=config,
                start_time=start_time,
            )
        else:
            config = dict(DEFAULTS)
            config['reference.annotations'] = list(args.annotations)
            if args.maxgap is not None:
                config['detect.maxgap'] = args.maxgap
            if args.minscore is not None:
                config['detect.minscore'] = args.minscore
            validate_config(config)
            _util.logger.info(f'writing: {args.outputfile}')
            with open(args.outputfile, 'w') as fh:
                fh.write(json.dumps(config, sort_keys=True, indent='  '))

        duration = int(time.time()) - start_time
        hours = duration - duration % 3600
        minutes = duration - hours - (duration - hours) % 60
        seconds = duration - hours - minutes
        _util.logger.info(
            'run time (hh/mm/ss): {}:{:02d}:{:02d}'.format(hours // 3600, minutes // 60, seconds)
        )
        _util.logger.info(f'run time (s): {duration}')
    finally:
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
        for handler in original_logging_handlers:
            logging.root.addHandler(handler)
    return EXIT_OK


if __name__ == '__main__':
    main()
