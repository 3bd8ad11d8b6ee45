# License: BSD3

"""
Miscellaneous utility functions
"""

import argparse

from .layer import LAYERS, FEATURE_PREFIX, MISC_PREFIX


LAYER_HELP = ("comma-separated list of layers among: {}, or {}KEY / {}KEY "
              "for a single feature".format(', '.join(LAYERS),
                                            FEATURE_PREFIX, MISC_PREFIX))
"""
Help string for the flags that take a list of layers
"""


def add_subcommand(subparsers, module):
    """
    Add a subcommand module to an argparser.

    The module gives its command name in a NAME constant; the first line
    of its docstring is the help text shown in the command listing, and
    the rest of the docstring (kept as written) is the epilog of the
    command's own help.

    Returns the resulting subparser for the module
    """
    summary, _, details = module.__doc__.strip().partition('\n')
    return subparsers.add_parser(module.NAME,
                                 help=summary,
                                 epilog=details.strip() or None,
                                 formatter_class=argparse.
                                 RawDescriptionHelpFormatter)


def add_treebank_args(parser, names, descriptions):
    """
    Augment a subcommand argparser with the two treebank paths it
    compares
    """
    for name, descr in zip(names, descriptions):
        parser.add_argument(name, metavar=name.upper(),
                            help=descr + ' (CoNLL-U, may be gzipped)')
