# License: BSD3

"""Labeled and unlabeled attachment scores.

For each token of the gold treebank, its dependency edge is compared
with that of the predicted token at the same position:

* LAS: head and relation both match
* UAS: head matches, whatever the relation

Both also come in a variant which leaves out punctuation tokens (as
decided by the form of the gold token).
"""

import unicodedata

from ..internalutil import TbUtilException
from . import percentage


class StructuralError(TbUtilException):
    """
    A sentence is not a proper dependency tree (eg. a token has no head)
    """
    def __init__(self, msg):
        super(StructuralError, self).__init__(msg)


def is_punctuation(form):
    """
    True if every character of the form is in one of the Unicode
    punctuation categories (P*).

    Note that this holds for the empty form.
    """
    return all(unicodedata.category(c).startswith('P') for c in form)


def _edge(sentence, idx, diag_sentence):
    edge = sentence.head(idx)
    if edge is None:
        raise StructuralError("Token without head: {} in:\n{}".format(
            idx, diag_sentence.to_conllu()))
    return edge


class AttachmentScores(object):
    """Running attachment scores

    Attributes
    ----------
    total, labeled_correct, unlabeled_correct : int
        Counts over all tokens
    nopunct_total, nopunct_labeled_correct, nopunct_unlabeled_correct : int
        Counts over non-punctuation tokens only
    """

    def __init__(self):
        self.labeled_correct = 0
        self.unlabeled_correct = 0
        self.total = 0
        self.nopunct_labeled_correct = 0
        self.nopunct_unlabeled_correct = 0
        self.nopunct_total = 0

    def update(self, gold, predicted):
        """
        Count the tokens of an aligned pair of sentences (see
        `tbutil.align.aligned_pairs`)

        Raises
        ------
        StructuralError
            If a token of either sentence has no head
        """
        for idx in range(1, len(gold)):
            punct = is_punctuation(gold[idx].form)

            # the gold sentence is shown in both cases
            gold_edge = _edge(gold, idx, gold)
            pred_edge = _edge(predicted, idx, gold)

            self.total += 1
            if not punct:
                self.nopunct_total += 1

            if pred_edge == gold_edge:
                self.labeled_correct += 1
                if not punct:
                    self.nopunct_labeled_correct += 1

            if pred_edge.head == gold_edge.head:
                self.unlabeled_correct += 1
                if not punct:
                    self.nopunct_unlabeled_correct += 1

    def results(self):
        """
        Returns
        -------
        scores : list of (string, float, int, int)
            description, percentage, correct, total for LAS, LAS
            without punctuation, UAS and UAS without punctuation (in
            that order)
        """
        counts = [('LAS', self.labeled_correct, self.total),
                  ('LASnp', self.nopunct_labeled_correct,
                   self.nopunct_total),
                  ('UAS', self.unlabeled_correct, self.total),
                  ('UASnp', self.nopunct_unlabeled_correct,
                   self.nopunct_total)]
        return [(desc, percentage(correct, total), correct, total)
                for desc, correct, total in counts]


def attachment_scores(pairs):
    """Attachment scores of a whole treebank

    Parameters
    ----------
    pairs : iterable of (Sentence, Sentence)
        (gold, predicted) pairs, eg. from `tbutil.align.aligned_pairs`

    Returns
    -------
    scorer : AttachmentScores
    """
    scorer = AttachmentScores()
    for gold, predicted in pairs:
        scorer.update(gold, predicted)
    return scorer
