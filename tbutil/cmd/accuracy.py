# License: BSD3

"""
Compute the accuracy of a layer, or attachment scores

Compares a predicted treebank against a gold standard one, sentence by
sentence and token by token. Both treebanks must have the same number of
tokens in each sentence.
"""

import argparse
import logging

from tabulate import tabulate

from ..align import GOLD_PREDICTED, aligned_pairs
from ..corpus import open_treebank
from ..layer import UnknownLayerError, feature_layer, misc_layer, \
    parse_layers
from ..metrics import percentage
from ..metrics.accuracy import layer_accuracy
from ..metrics.attachment import attachment_scores
from ..util import LAYER_HELP, add_treebank_args

NAME = 'accuracy'

logger = logging.getLogger(__name__)


def layer_list(string):
    """
    Parse a comma-separated list of layers (for argparse)
    """
    try:
        return parse_layers(string)
    except UnknownLayerError as err:
        raise argparse.ArgumentTypeError(str(err))


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_treebank_args(parser,
                      ['gold_treebank', 'predicted_treebank'],
                      ['gold standard treebank', 'non-gold treebank'])
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument('--attachment', '-a', action='store_true',
                        help='compute attachment scores (LAS/UAS)')
    source.add_argument('--layer', '-l', type=layer_list, metavar='LAYERS',
                        help='evaluate layers; ' + LAYER_HELP)
    source.add_argument('--feature', '-f', metavar='KEY',
                        help='evaluate a morphological feature')
    source.add_argument('--misc', '-m', metavar='KEY',
                        help='evaluate a miscellaneous feature')
    parser.add_argument('--default', '-d', metavar='VALUE',
                        help='value to use when no value is present '
                        '(not with --attachment)')
    parser.add_argument('--per-layer', action='store_true',
                        help='also show the accuracy of each layer '
                        '(not with --attachment)')
    parser.set_defaults(func=main, subparser=parser)


def selected_layers(args):
    """
    The layers to evaluate as requested by the `--layer`, `--feature`
    or `--misc` flags (None in attachment mode)
    """
    if args.layer is not None:
        return args.layer
    elif args.feature is not None:
        return [feature_layer(args.feature)]
    elif args.misc is not None:
        return [misc_layer(args.misc)]
    else:
        return None


def check_attachment_flags(args):
    """
    Reject the layer accuracy options in attachment mode (through the
    subcommand parser, so with its usage line and exit status)
    """
    conflicts = [('--default/-d', args.default is not None),
                 ('--per-layer', args.per_layer)]
    for flag, given in conflicts:
        if given:
            args.subparser.error("argument {}: not allowed with "
                                 "argument --attachment/-a".format(flag))


def print_layer_results(scorer, per_layer=False):
    "show the output of a LayerAccuracy"
    print("Accuracy: {:.2f} ({}/{})".format(scorer.accuracy(),
                                           scorer.correct,
                                           scorer.total))
    if per_layer:
        rows = [(name, percentage(correct, total), correct, total)
                for name, correct, total in scorer.per_layer()]
        print(tabulate(rows,
                       headers=['layer', 'accuracy', 'correct', 'total'],
                       floatfmt='.2f'))


def print_attachment_results(scorer):
    "show the output of an AttachmentScores"
    for desc, pct, correct, total in scorer.results():
        print("{}\t{:.2f}\t{}\t{}".format(desc, pct, correct, total))


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    if args.attachment:
        check_attachment_flags(args)

    gold = open_treebank(args.gold_treebank, 'gold standard treebank')
    predicted = open_treebank(args.predicted_treebank, 'predicted treebank')
    pairs = aligned_pairs(gold, predicted, names=GOLD_PREDICTED)

    if args.attachment:
        logger.info("Computing attachment scores")
        print_attachment_results(attachment_scores(pairs))
    else:
        layers = selected_layers(args)
        logger.info("Computing accuracy on %s",
                    ', '.join(x.name for x in layers))
        scorer = layer_accuracy(pairs, layers, default=args.default)
        print_layer_results(scorer, per_layer=args.per_layer)
