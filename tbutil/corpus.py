# License: BSD3

"""
Reading treebanks from CoNLL-U files.

We delegate the actual parsing to the `conllu` library and turn each of
its token lists into a `tbutil.annotation.Sentence`. Files ending in
`.gz` are decompressed on the fly.

Reading is lazy: `open_treebank` returns an iterator which parses one
sentence per step. If something goes wrong mid-stream, the iterator
yields a single `ReadFailure` (wrapping the cause) and stops, so that
consumers can report which treebank was broken.
"""

import gzip
import os
import logging

from conllu import parse_incr
from conllu.exceptions import ParseException

from .annotation import Sentence, Token
from .internalutil import TbUtilException, nullable

logger = logging.getLogger(__name__)


class CorpusReadError(TbUtilException):
    """
    A treebank could not be opened or read
    """
    def __init__(self, msg, cause=None):
        super(CorpusReadError, self).__init__(msg)
        self.cause = cause


class ReadFailure(object):
    """
    Stands in place of a sentence that could not be read
    """
    def __init__(self, cause):
        self.cause = cause

    def __str__(self):
        return str(self.cause)

    def __repr__(self):
        return 'ReadFailure({!r})'.format(self.cause)


def _is_word_id(tok_id):
    "True for plain word ids (not multiword ranges nor empty nodes)"
    return isinstance(tok_id, int)


def _feature_map(value):
    "conllu gives us None for `_`"
    return value or {}


def _misc_map(value):
    """
    Misc map where keys given without a value map to None (depending on
    its version, conllu gives us either None or '' for those)
    """
    return {k: (v if v else None) for k, v in (value or {}).items()}


def read_token(conllu_token):
    """
    Convert a `conllu.models.Token` (a dict) into a Token
    """
    form = conllu_token.get('form')
    return Token(form if form is not None else '_',
                 lemma=nullable(conllu_token.get('lemma')),
                 upos=nullable(conllu_token.get('upos')),
                 xpos=nullable(conllu_token.get('xpos')),
                 features=_feature_map(conllu_token.get('feats')),
                 misc=_misc_map(conllu_token.get('misc')))


def read_sentence(token_list):
    """
    Convert a `conllu.models.TokenList` into a Sentence.

    Multiword token ranges and empty nodes are not part of the
    dependency tree and are dropped.
    """
    words = [x for x in token_list if _is_word_id(x.get('id'))]
    tokens = [read_token(x) for x in words]
    heads = [x.get('head') for x in words]
    relations = [nullable(x.get('deprel')) for x in words]
    return Sentence(tokens, heads, relations)


def read_sentences(stream):
    """
    Lazily read sentences from an open text stream.

    Yields
    ------
    sentence : Sentence or ReadFailure
        A ReadFailure is only ever yielded last
    """
    try:
        for token_list in parse_incr(stream):
            yield read_sentence(token_list)
    except (ParseException, IOError, UnicodeDecodeError, ValueError) as err:
        yield ReadFailure(err)


def _open(path):
    if path.endswith('.gz'):
        return gzip.open(path, 'rt', encoding='utf-8')
    return open(path, 'r', encoding='utf-8')


def open_treebank(path, description='treebank'):
    """
    Open a CoNLL-U file (possibly gzipped) for lazy reading.

    The file itself is only opened once the first sentence is asked
    for, and closed when the iterator is exhausted or discarded.

    Parameters
    ----------
    path : string
        File to read
    description : string, optional
        What the file is, for error messages (eg. "gold standard
        treebank")

    Returns
    -------
    sentences : iterator of Sentence or ReadFailure

    Raises
    ------
    CorpusReadError
        If the file does not exist or is not readable
    """
    if not (os.path.isfile(path) and os.access(path, os.R_OK)):
        raise CorpusReadError("Cannot open {}: {}".format(description, path))
    logger.info("Reading %s from %s", description, path)
    return _stream_sentences(path)


def _stream_sentences(path):
    "read sentences, closing the stream once done"
    try:
        stream = _open(path)
    except IOError as err:
        yield ReadFailure(err)
        return
    with stream:
        nb_sents = 0
        for sent in read_sentences(stream):
            if not isinstance(sent, ReadFailure):
                nb_sents += 1
            yield sent
        logger.debug("Read %d sentences from %s", nb_sents, path)
