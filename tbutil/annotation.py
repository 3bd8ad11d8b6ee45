# License: BSD3

"""
Low-level representation of treebank sentences: tokens and the
dependency tree over them.

A sentence is a sequence of nodes. Node 0 is a synthetic root which
carries no token; nodes 1..n each carry a `Token` and (normally) a
dependency edge to their head, head 0 meaning attachment to the root.
"""

from collections import namedtuple

from frozendict import frozendict

from .internalutil import nullable


_ROOT_HEAD = -1
_ROOT_RELATION = None

PLACEHOLDER = '_'
"""
How absent values are written when a sentence is rendered (never used
for comparisons)
"""


def features_str(features):
    """
    Deterministic string form of a feature map: `key=value` pairs in
    insertion order, joined by `|` (the empty map gives the empty string)
    """
    return '|'.join('{}={}'.format(k, v) for k, v in features.items())


def misc_str(misc):
    """
    Deterministic string form of a misc map, like `features_str` except
    that keys without a value are written on their own
    """
    return '|'.join(k if v is None else '{}={}'.format(k, v)
                    for k, v in misc.items())


class Token(object):
    """
    A word with its annotations.

    Only `form` is mandatory; `lemma`, `upos` and `xpos` are None when
    absent. `features` maps keys to values and `misc` maps keys to
    optional values; both keep insertion order and are read-only.
    """
    def __init__(self, form, lemma=None, upos=None, xpos=None,
                 features=None, misc=None):
        self.form = form
        self.lemma = lemma
        self.upos = upos
        self.xpos = xpos
        self.features = frozendict(features or {})
        self.misc = frozendict(misc or {})

    def _tuple(self):
        return (self.form, self.lemma, self.upos, self.xpos,
                tuple(self.features.items()), tuple(self.misc.items()))

    def __eq__(self, other):
        return isinstance(other, Token) and self._tuple() == other._tuple()

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash(self._tuple())

    def __repr__(self):
        return 'Token({!r}, lemma={!r}, upos={!r}, xpos={!r})'.format(
            self.form, self.lemma, self.upos, self.xpos)

    def __str__(self):
        return self.form + "/" + (self.upos or PLACEHOLDER)


class Edge(namedtuple('Edge', 'head relation')):
    """
    A dependency edge seen from its dependent: index of the head node
    and label of the relation (possibly None)
    """
    __slots__ = ()


class Sentence(object):
    """A dependency-annotated sentence

    Parameters
    ----------
    tokens : list of Token
        Tokens of the sentence, in order (not including the root)
    heads : list of int or None, optional
        Head of each token (0 for the root); None marks a token without
        a recorded head. Defaults to no heads at all.
    relations : list of string or None, optional
        Relation label of each token's edge
    """

    def __init__(self, tokens, heads=None, relations=None):
        tokens = list(tokens)
        if heads is None:
            heads = [None for _ in tokens]
        if relations is None:
            relations = [None for _ in tokens]
        if not len(heads) == len(relations) == len(tokens):
            raise ValueError("Need exactly one head and one relation "
                             "per token ({} tokens, {} heads, {} relations)"
                             "".format(len(tokens), len(heads),
                                       len(relations)))
        # node 0 is the root
        self.nodes = [None] + tokens
        self.heads = [_ROOT_HEAD] + list(heads)
        self.relations = [_ROOT_RELATION] + list(relations)

    def __len__(self):
        "number of nodes, root included"
        return len(self.nodes)

    def __getitem__(self, idx):
        return self.nodes[idx]

    def nb_tokens(self):
        "number of tokens (ie. nodes minus the root)"
        return len(self.nodes) - 1

    def tokens(self):
        "iterate over the tokens of the sentence, in order"
        return iter(self.nodes[1:])

    def head(self, idx):
        """Dependency edge of node `idx`.

        Returns
        -------
        edge : Edge or None
            None if the node has no recorded head (the root never has
            one)
        """
        if idx == 0:
            return None
        head = self.heads[idx]
        if head is None:
            return None
        return Edge(head, self.relations[idx])

    def set_head(self, dep, head, relation=None):
        """Attach node `dep` to node `head` with the given relation"""
        if dep == 0:
            raise ValueError("The root node cannot have a head")
        self.heads[dep] = head
        self.relations[dep] = relation

    def to_conllu(self):
        """
        Render the sentence as CoNLL-U rows (mostly meant for error
        messages)
        """
        lines = []
        for idx, tok in enumerate(self.tokens(), start=1):
            head = self.heads[idx]
            cols = [str(idx),
                    tok.form,
                    tok.lemma,
                    tok.upos,
                    tok.xpos,
                    features_str(tok.features),
                    None if head is None else str(head),
                    self.relations[idx],
                    None,
                    misc_str(tok.misc)]
            lines.append('\t'.join(nullable(c, null='') or PLACEHOLDER
                                   for c in cols))
        return '\n'.join(lines)

    def __str__(self):
        return ' '.join(tok.form for tok in self.tokens())
