# License: BSD3

"""
Convert a treebank to plain text

One line per sentence: the value of a single layer for each token,
separated by spaces (`_` where the value is absent).
"""

from ..annotation import PLACEHOLDER
from ..corpus import CorpusReadError, ReadFailure, open_treebank
from ..layer import extract, resolve

NAME = 'to-text'

TEXT_LAYERS = ['form', 'lemma', 'upos', 'xpos']
"""
Layers that make sense as running text
"""


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    parser.add_argument('treebank', metavar='TREEBANK',
                        help='treebank to convert (CoNLL-U, may be gzipped)')
    parser.add_argument('--layer', '-l', choices=TEXT_LAYERS,
                        default='form',
                        help='layer to output as text (default: form)')
    parser.set_defaults(func=main)


def sentence_text(sentence, layer):
    "a sentence as a line of text"
    values = (extract(layer, tok) for tok in sentence.tokens())
    return ' '.join(PLACEHOLDER if x is None else x for x in values)


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    layer = resolve(args.layer)
    for sentence in open_treebank(args.treebank):
        if isinstance(sentence, ReadFailure):
            raise CorpusReadError("Cannot read sentence: {}"
                                  .format(sentence.cause),
                                  cause=sentence.cause)
        print(sentence_text(sentence, layer))
