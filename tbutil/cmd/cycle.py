# License: BSD3

"""
Find cycles in a treebank

Prints every sentence whose dependency structure contains a cycle,
followed by an empty line and a line listing the nodes of each cycle.
"""

import logging

from ..corpus import CorpusReadError, ReadFailure, open_treebank
from ..structure import find_cycles

NAME = 'cycle'

logger = logging.getLogger(__name__)


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    parser.add_argument('treebank', metavar='TREEBANK',
                        help='treebank to check (CoNLL-U, may be gzipped)')
    parser.set_defaults(func=main)


def report_cycles(sentence, cycles):
    "show a sentence and its cycles"
    print(sentence.to_conllu())
    print()
    for cycle in cycles:
        print("Cycle: {}".format(', '.join(str(x) for x in cycle)))


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    nb_cyclic = 0
    for sentence in open_treebank(args.treebank):
        if isinstance(sentence, ReadFailure):
            raise CorpusReadError("Cannot read sentence: {}"
                                  .format(sentence.cause),
                                  cause=sentence.cause)
        cycles = find_cycles(sentence)
        if cycles:
            nb_cyclic += 1
            report_cycles(sentence, cycles)
    logger.info("%d sentence(s) with cycles", nb_cyclic)
