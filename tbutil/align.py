# License: BSD3

"""
Walking two treebanks in lockstep.

Sentences are paired by reading order, and nothing clever is attempted:
each pair must have the same number of tokens. As with `zip`, whatever
is left in the longer treebank once the shorter one runs out is ignored.
"""

import logging

from .corpus import CorpusReadError, ReadFailure
from .internalutil import TbUtilException

logger = logging.getLogger(__name__)

GOLD_PREDICTED = ('gold standard', 'predicted')
FIRST_SECOND = ('first', 'second')


class AlignmentError(TbUtilException):
    """
    Two sentences that should be aligned do not have the same number
    of tokens
    """
    def __init__(self, len1, len2):
        super(AlignmentError, self).__init__(
            "Different number of tokens: {} {}".format(len1, len2))
        self.lengths = (len1, len2)


def check_same_length(sentence1, sentence2):
    """
    Raise an AlignmentError unless both sentences have as many tokens
    """
    len1 = sentence1.nb_tokens()
    len2 = sentence2.nb_tokens()
    if len1 != len2:
        raise AlignmentError(len1, len2)


def _checked(sentence, name):
    if isinstance(sentence, ReadFailure):
        raise CorpusReadError("Cannot read sentence from {} treebank: {}"
                              "".format(name, sentence.cause),
                              cause=sentence.cause)
    return sentence


def aligned_pairs(sentences1, sentences2, names=GOLD_PREDICTED):
    """Pair up the sentences of two treebanks.

    Parameters
    ----------
    sentences1, sentences2 : iterable of Sentence or ReadFailure
        The two treebanks, eg. as returned by
        `tbutil.corpus.open_treebank`
    names : (string, string)
        How to refer to each treebank in error messages

    Yields
    ------
    pair : (Sentence, Sentence)

    Raises
    ------
    CorpusReadError
        If either side gives us a ReadFailure
    AlignmentError
        If the sentences of a pair differ in length
    """
    name1, name2 = names
    nb_pairs = 0
    for sent1, sent2 in zip(sentences1, sentences2):
        sent1 = _checked(sent1, name1)
        sent2 = _checked(sent2, name2)
        check_same_length(sent1, sent2)
        nb_pairs += 1
        yield sent1, sent2
    logger.debug("Aligned %d sentence pairs", nb_pairs)
