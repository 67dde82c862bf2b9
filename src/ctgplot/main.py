#!python
import argparse
import logging
import platform
import sys
import time
from typing import List, Optional

from . import __version__
from . import config as _config
from . import util as _util
from .constants import EXIT_ERROR, EXIT_OK, OUTPUT_FORMAT, PROGNAME, SUBCOMMAND, float_positive
from .error import InputFileError, MissingLengthError
from .illustrate.constants import DEFAULTS
from .merge import main as merge_main
from .plot import main as plot_main
from .util import filepath


def create_parser(argv):
    parser = argparse.ArgumentParser(prog=PROGNAME, formatter_class=_config.CustomHelpFormatter)
    parser.add_argument(
        '-v',
        '--version',
        action='version',
        version='%(prog)s version ' + __version__,
        help='Outputs the version number',
    )
    subp = parser.add_subparsers(dest='command', help='specifies which subprogram to use')
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

    # plot arguments
    required[SUBCOMMAND.PLOT].add_argument(
        'ctgmap_json', type=filepath, help='json file of the alignment records and sequence lengths'
    )
    required[SUBCOMMAND.PLOT].add_argument(
        'output_prefix', help='path of the output file without the extension', metavar='OUTPUT_PREFIX'
    )
    optional[SUBCOMMAND.PLOT].add_argument(
        '--total_target_bases',
        type=float_positive,
        default=DEFAULTS.total_target_bases,
        help=DEFAULTS.define('total_target_bases'),
    )
    optional[SUBCOMMAND.PLOT].add_argument(
        '--panel_width',
        type=float_positive,
        default=DEFAULTS.panel_width,
        help=DEFAULTS.define('panel_width'),
    )
    optional[SUBCOMMAND.PLOT].add_argument(
        '--cytoband',
        dest='cytoband_file',
        type=filepath,
        help='cytoband file (json or UCSC tab-delimited) used to draw the target backbones',
    )
    optional[SUBCOMMAND.PLOT].add_argument(
        '--ctg',
        dest='target',
        help='only draw this target sequence. Use "summary" to draw only the genome-wide overview',
    )
    optional[SUBCOMMAND.PLOT].add_argument(
        '--ref_annotation_bed',
        type=filepath,
        help='bed file of the target regions to highlight',
    )
    optional[SUBCOMMAND.PLOT].add_argument(
        '--svg',
        dest='output_format',
        action='store_const',
        const=OUTPUT_FORMAT.SVG,
        default=OUTPUT_FORMAT.HTML,
        help='write a bare svg document instead of an html page with zoom controls',
    )

    # merge arguments
    required[SUBCOMMAND.MERGE].add_argument(
        'input_list', type=filepath, help='tab-delimited file of label and bed file path pairs'
    )
    required[SUBCOMMAND.MERGE].add_argument(
        'output_bed', help='path to the merged output bed file', metavar='OUTPUT_BED'
    )

    return parser, parser.parse_args(argv)


def main(argv: Optional[List[str]] = None):
    """
    sets up the parser and checks the validity of command line args
    loads the input files and redirects into subcommand main functions

    Args:
        argv: List of arguments, defaults to command line arguments

    Returns:
        int: the exit code
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
    for handler in original_logging_handlers:
        logging.root.removeHandler(handler)
    if args.log:  # redirect stdout AND stderr to a log file
        log_conf['filename'] = args.log
    logging.basicConfig(**log_conf)

    _util.logger.info(f'{PROGNAME}: {__version__}')
    _util.logger.info(f'hostname: {platform.node()}')
    _util.log_arguments(args)

    command = args.command
    try:
        if command == SUBCOMMAND.PLOT:
            plot_main(
                ctgmap_json=args.ctgmap_json,
                output_prefix=args.output_prefix,
                output_format=args.output_format,
                target=args.target,
                cytoband_file=args.cytoband_file,
                ref_annotation_bed=args.ref_annotation_bed,
                panel_width=args.panel_width,
                total_target_bases=args.total_target_bases,
            )
        else:
            merge_main(args.input_list, args.output_bed)

        duration = int(time.time()) - start_time
        hours = duration - duration % 3600
        minutes = duration - hours - (duration - hours) % 60
        seconds = duration - hours - minutes
        _util.logger.info(
            'run time (hh/mm/ss): {}:{:02d}:{:02d}'.format(hours // 3600, minutes // 60, seconds)
        )
        _util.logger.info(f'run time (s): {duration}')
    except (InputFileError, MissingLengthError) as err:
        _util.logger.error(str(err))
        return EXIT_ERROR
    finally:
        for handler in logging.root.handlers[:]:
            logging.root.removeHandler(handler)
        for handler in original_logging_handlers:
            logging.root.addHandler(handler)
    return EXIT_OK


if __name__ == '__main__':
    sys.exit(main())
