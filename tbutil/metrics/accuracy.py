# License: BSD3

"""Accuracy over annotation layers.

Every (token, layer) pair of the gold treebank counts once; it is
correct if the predicted token has the same value for that layer.
"""

from collections import Counter

from ..layer import extract
from . import percentage


class LayerAccuracy(object):
    """Running accuracy over a set of layers

    Parameters
    ----------
    layers : list of Layer
        Layers to compare
    default : string, optional
        If given, an absent value on either side is replaced by this
        string before comparing. Otherwise absent values are compared
        as they are (absent matches absent, and nothing else).
    """

    def __init__(self, layers, default=None):
        self.layers = list(layers)
        self.default = default
        self.correct = 0
        self.total = 0
        self._correct_by_layer = Counter()
        self._total_by_layer = Counter()

    def _value(self, layer, token):
        value = extract(layer, token)
        if value is None:
            return self.default
        return value

    def update(self, gold, predicted):
        """
        Count the tokens of an aligned pair of sentences (see
        `tbutil.align.aligned_pairs`)
        """
        for tok_gold, tok_pred in zip(gold.tokens(), predicted.tokens()):
            for layer in self.layers:
                self.total += 1
                self._total_by_layer[layer] += 1
                if self._value(layer, tok_gold) == \
                        self._value(layer, tok_pred):
                    self.correct += 1
                    self._correct_by_layer[layer] += 1

    def accuracy(self):
        "percentage of correct values (NaN if nothing was counted)"
        return percentage(self.correct, self.total)

    def per_layer(self):
        """
        Breakdown of the counts per layer, in layer order.

        Returns
        -------
        rows : list of (string, int, int)
            layer name, correct, total
        """
        # a layer may be asked for twice; report it once
        seen = []
        for layer in self.layers:
            if layer not in seen:
                seen.append(layer)
        return [(layer.name,
                 self._correct_by_layer[layer],
                 self._total_by_layer[layer])
                for layer in seen]


def layer_accuracy(pairs, layers, default=None):
    """Accuracy of a whole treebank

    Parameters
    ----------
    pairs : iterable of (Sentence, Sentence)
        (gold, predicted) pairs, eg. from `tbutil.align.aligned_pairs`
    layers : list of Layer
    default : string, optional
        see `LayerAccuracy`

    Returns
    -------
    scorer : LayerAccuracy
    """
    scorer = LayerAccuracy(layers, default=default)
    for gold, predicted in pairs:
        scorer.update(gold, predicted)
    return scorer
