# -*- coding: utf-8 -*-
#
# License: BSD3

"""
Tests for tbutil.metrics
"""

import math
import unittest

from tbutil.annotation import Sentence, Token
from tbutil.layer import feature_layer, misc_layer, parse_layers
from tbutil.metrics import percentage
from tbutil.metrics.accuracy import LayerAccuracy, layer_accuracy
from tbutil.metrics.attachment import AttachmentScores, StructuralError, \
    attachment_scores, is_punctuation


def mk_tree(forms, edges):
    "sentence with the given forms and (head, relation) edges"
    return Sentence([Token(x) for x in forms],
                    [h for h, _ in edges],
                    [r for _, r in edges])


GOLD_EDGES = [(2, 'nsubj'), (0, 'root'), (2, 'obj')]
FORMS = ['Kim', 'eats', 'apples']


class PercentageTest(unittest.TestCase):
    "tests for tbutil.metrics.percentage"

    def test_percentage(self):
        "plain percentages"
        self.assertAlmostEqual(66.6667, percentage(2, 3), places=4)
        self.assertEqual(100., percentage(4, 4))

    def test_empty(self):
        "nothing counted gives NaN, not an error"
        self.assertTrue(math.isnan(percentage(0, 0)))


class LayerAccuracyTest(unittest.TestCase):
    "tests for tbutil.metrics.accuracy"

    def setUp(self):
        self.gold = Sentence([Token('a', upos='DET', features={'Def': 'Y'}),
                              Token('b', upos='NOUN'),
                              Token('c', upos=None, misc={'Note': None})])
        self.pred = Sentence([Token('a', upos='DET'),
                              Token('b', upos='VERB'),
                              Token('c', upos=None, misc={'Note': 'x'})])

    def test_identity(self):
        "a treebank is fully accurate against itself"
        layers = parse_layers('form,lemma,upos,xpos,features,misc')
        scorer = layer_accuracy([(self.gold, self.gold)] * 2, layers)
        self.assertEqual(2 * 3 * 6, scorer.total)
        self.assertEqual(scorer.total, scorer.correct)
        self.assertEqual(100., scorer.accuracy())

    def test_absent_matches_absent(self):
        "without default, absent == absent"
        scorer = layer_accuracy([(self.gold, self.pred)],
                                parse_layers('upos'))
        self.assertEqual((2, 3), (scorer.correct, scorer.total))

    def test_several_layers(self):
        "every (token, layer) pair counts once"
        scorer = layer_accuracy([(self.gold, self.pred)],
                                parse_layers('form,upos'))
        self.assertEqual((5, 6), (scorer.correct, scorer.total))

    def test_default(self):
        "the default replaces absent values before comparing"
        layer = feature_layer('Def')
        scorer = layer_accuracy([(self.gold, self.pred)], [layer])
        # absent on both sides for b and c
        self.assertEqual((2, 3), (scorer.correct, scorer.total))
        scorer = layer_accuracy([(self.gold, self.pred)], [layer],
                                default='Y')
        self.assertEqual((3, 3), (scorer.correct, scorer.total))
        scorer = layer_accuracy([(self.gold, self.pred)], [layer],
                                default='N')
        self.assertEqual((2, 3), (scorer.correct, scorer.total))

    def test_misc_without_value(self):
        "a misc key without value is absent"
        layer = misc_layer('Note')
        scorer = layer_accuracy([(self.gold, self.pred)], [layer],
                                default='x')
        self.assertEqual((3, 3), (scorer.correct, scorer.total))

    def test_empty(self):
        "no tokens, no layers: NaN"
        scorer = LayerAccuracy(parse_layers('upos'))
        self.assertEqual(0, scorer.total)
        self.assertTrue(math.isnan(scorer.accuracy()))
        scorer = layer_accuracy([(self.gold, self.pred)], [])
        self.assertTrue(math.isnan(scorer.accuracy()))

    def test_per_layer(self):
        "breakdown in layer order"
        scorer = layer_accuracy([(self.gold, self.pred)],
                                parse_layers('upos,form,upos'))
        self.assertEqual([('upos', 4, 6), ('form', 3, 3)],
                         scorer.per_layer())


class PunctuationTest(unittest.TestCase):
    "tests for tbutil.metrics.attachment.is_punctuation"

    def test_punct(self):
        "all characters must be punctuation"
        self.assertTrue(is_punctuation('.'))
        self.assertTrue(is_punctuation('...'))
        self.assertTrue(is_punctuation(u'«'))
        self.assertTrue(is_punctuation(u'—'))
        self.assertFalse(is_punctuation('a.'))
        self.assertFalse(is_punctuation('$'))
        self.assertFalse(is_punctuation('+'))
        self.assertFalse(is_punctuation('1'))

    def test_empty(self):
        "the empty form counts as punctuation"
        self.assertTrue(is_punctuation(''))


class AttachmentScoresTest(unittest.TestCase):
    "tests for tbutil.metrics.attachment"

    def test_wrong_head(self):
        "a wrong head is wrong for both LAS and UAS"
        gold = mk_tree(FORMS, GOLD_EDGES)
        pred = mk_tree(FORMS, [(2, 'nsubj'), (0, 'root'), (3, 'obj')])
        scorer = attachment_scores([(gold, pred)])
        self.assertEqual(3, scorer.total)
        self.assertEqual(2, scorer.labeled_correct)
        self.assertEqual(2, scorer.unlabeled_correct)

    def test_wrong_label(self):
        "a wrong label only counts against LAS"
        gold = mk_tree(FORMS, GOLD_EDGES)
        pred = mk_tree(FORMS, [(2, 'nsubj'), (0, 'root'), (2, 'dobj')])
        scorer = attachment_scores([(gold, pred)])
        self.assertEqual(3, scorer.total)
        self.assertEqual(2, scorer.labeled_correct)
        self.assertEqual(3, scorer.unlabeled_correct)

    def test_results(self):
        "four scores in a fixed order"
        gold = mk_tree(FORMS, GOLD_EDGES)
        pred = mk_tree(FORMS, [(2, 'nsubj'), (0, 'root'), (2, 'dobj')])
        results = attachment_scores([(gold, pred)]).results()
        self.assertEqual(['LAS', 'LASnp', 'UAS', 'UASnp'],
                         [x[0] for x in results])
        self.assertEqual([(2, 3), (2, 3), (3, 3), (3, 3)],
                         [(x[2], x[3]) for x in results])
        self.assertAlmostEqual(66.67, results[0][1], places=2)
        self.assertEqual(100., results[2][1])

    def test_punctuation(self):
        "punctuation is decided on the gold form"
        forms = ['Kim', 'eats', '.']
        gold = mk_tree(forms, [(2, 'nsubj'), (0, 'root'), (2, 'punct')])
        pred = mk_tree(['Kim', 'eats', 'x'],
                       [(2, 'nsubj'), (0, 'root'), (1, 'punct')])
        scorer = attachment_scores([(gold, pred)])
        self.assertEqual((3, 2), (scorer.total, scorer.nopunct_total))
        self.assertEqual((2, 2), (scorer.labeled_correct,
                                  scorer.nopunct_labeled_correct))
        self.assertEqual((2, 2), (scorer.unlabeled_correct,
                                  scorer.nopunct_unlabeled_correct))

    def test_ordering(self):
        "unlabeled >= labeled, nopunct <= all"
        gold = mk_tree(['a', ',', 'b', '!'],
                       [(0, 'root'), (1, 'punct'), (1, 'conj'),
                        (1, 'punct')])
        pred = mk_tree(['a', ',', 'b', '!'],
                       [(0, 'root'), (3, 'punct'), (1, 'obj'),
                        (1, 'dep')])
        scorer = attachment_scores([(gold, pred), (gold, gold)])
        self.assertGreaterEqual(scorer.unlabeled_correct,
                                scorer.labeled_correct)
        self.assertGreaterEqual(scorer.nopunct_unlabeled_correct,
                                scorer.nopunct_labeled_correct)
        self.assertLessEqual(scorer.nopunct_total, scorer.total)
        self.assertLessEqual(scorer.nopunct_labeled_correct,
                             scorer.nopunct_total)
        self.assertEqual((8, 4), (scorer.total, scorer.nopunct_total))
        self.assertEqual((5, 7), (scorer.labeled_correct,
                                  scorer.unlabeled_correct))

    def test_missing_head(self):
        "a token without head stops everything"
        gold = mk_tree(FORMS, GOLD_EDGES)
        pred = mk_tree(FORMS, [(2, 'nsubj'), (None, None), (2, 'obj')])
        scorer = AttachmentScores()
        with self.assertRaises(StructuralError) as cm:
            scorer.update(gold, pred)
        msg = str(cm.exception)
        self.assertIn('Token without head: 2', msg)
        self.assertIn('Kim', msg)

    def test_empty(self):
        "no tokens: NaN scores"
        results = AttachmentScores().results()
        self.assertTrue(all(math.isnan(x[1]) for x in results))
