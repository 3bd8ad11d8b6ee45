# License: BSD3

"""
tbutil command line entry point
"""

import argparse
import logging
import sys

from .cmd import SUBCOMMANDS, SUBCOMMAND_SECTIONS
from .internalutil import TbUtilException
from .util import add_subcommand

PROG = 'tbutil'

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def _sections_epilog():
    "list subcommands by section (argparse has no notion of sections)"
    lines = []
    for descr, section in SUBCOMMAND_SECTIONS:
        lines.append('{}: {}'.format(descr,
                                     ', '.join(x.NAME for x in section)))
    return '\n'.join(lines)


def mk_argparser():
    """
    Top-level argparser with one subparser per subcommand
    """
    arg_parser = argparse.ArgumentParser(prog=PROG,
                                         description='Treebank utilities',
                                         epilog=_sections_epilog())
    arg_parser.add_argument('--verbose', '-v',
                            action='count',
                            default=0,
                            help='more logging (repeat for debug output)')
    subparsers = arg_parser.add_subparsers(dest='subcommand',
                                           title='subcommands')
    subparsers.required = True
    for module in SUBCOMMANDS:
        subparser = add_subcommand(subparsers, module)
        module.config_argparser(subparser)
    return arg_parser


def main(argv=None):
    """
    Parse the command line and run the requested subcommand
    """
    arg_parser = mk_argparser()
    args = arg_parser.parse_args(argv)
    level = LOG_LEVELS[min(args.verbose, len(LOG_LEVELS) - 1)]
    logging.basicConfig(level=level,
                        format='%(name)s: %(levelname)s: %(message)s')
    try:
        args.func(args)
    except TbUtilException as err:
        sys.exit('{}: error: {}'.format(PROG, err))
