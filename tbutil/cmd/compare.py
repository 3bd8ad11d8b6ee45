# License: BSD3

"""
Compare two treebanks on specific layers

Prints every sentence in which the treebanks disagree on one of the
compared layers, one token per line: its index, the layers to show
(from the first treebank), then the compared layers from both
treebanks side by side. Differing values are highlighted.
"""

import argparse

from rich.console import Console
from rich.segment import Segments

from ..align import FIRST_SECOND, aligned_pairs
from ..corpus import open_treebank
from ..diff import compare_treebanks
from ..layer import UnknownLayerError, parse_layers
from ..util import LAYER_HELP, add_treebank_args

NAME = 'compare'


def _layer_list(what):
    def parse(string):
        "parse a list of layers for argparse"
        try:
            return parse_layers(string)
        except UnknownLayerError as err:
            raise argparse.ArgumentTypeError(
                "Cannot parse layer(s) to {}: {}".format(what, err))
    return parse


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_treebank_args(parser,
                      ['treebank_1', 'treebank_2'],
                      ['first treebank', 'second treebank'])
    parser.add_argument('--force-color', '-c', action='store_true',
                        help='force colored output')
    parser.add_argument('--layer', '-l', type=_layer_list('compare'),
                        default='upos', metavar='LAYERS',
                        help='layers to compare (default: upos); ' +
                        LAYER_HELP)
    parser.add_argument('--show', '-s', type=_layer_list('show'),
                        default='form', metavar='LAYERS',
                        help='layers to show (default: form)')
    parser.set_defaults(func=main)


def mk_console(force_color=False):
    """
    Console for the diff output; colour only on a terminal unless forced
    """
    return Console(force_terminal=True if force_color else None,
                   highlight=False,
                   soft_wrap=True,
                   emoji=False)


def print_row(console, row):
    """
    Print a rendered row as is; printing the Text itself would expand
    the tabs between our columns. Needs a soft-wrapping console.
    """
    console.print(Segments(row.render(console, end='\n')))


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    console = mk_console(force_color=args.force_color)
    first = open_treebank(args.treebank_1, 'first treebank')
    second = open_treebank(args.treebank_2, 'second treebank')
    pairs = aligned_pairs(first, second, names=FIRST_SECOND)
    for row in compare_treebanks(pairs, args.layer, args.show):
        print_row(console, row)
