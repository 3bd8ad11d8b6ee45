# -*- coding: utf-8 -*-
#
# License: BSD3
# pylint: disable=too-many-public-methods, invalid-name

"""
Tests for tbutil
"""

import gzip
import os
import shutil
import tempfile
import unittest

from tbutil.align import AlignmentError, aligned_pairs
from tbutil.annotation import Edge, Sentence, Token, features_str, misc_str
from tbutil.corpus import CorpusReadError, ReadFailure, open_treebank
from tbutil.diff import MISMATCH_STYLE, compare_treebanks, diff_indices, \
    render_diff
from tbutil.layer import Layer, LayerKind, UnknownLayerError, extract, \
    feature_layer, misc_layer, parse_layers, resolve
from tbutil.structure import dependency_graph, find_cycles


def mk_sentence(rows):
    """
    Sentence from (form, upos, head, relation) rows
    """
    tokens = [Token(form, upos=upos) for form, upos, _, _ in rows]
    heads = [head for _, _, head, _ in rows]
    relations = [rel for _, _, _, rel in rows]
    return Sentence(tokens, heads, relations)


CAT_SLEEPS = [('the', 'DET', 2, 'det'),
              ('cat', 'NOUN', 3, 'nsubj'),
              ('sleeps', 'VERB', 0, 'root'),
              ('.', 'PUNCT', 3, 'punct')]

CONLLU_SAMPLE = u"""# sent_id = 1
# text = Le chat dort.
1\tLe\tle\tDET\t_\tDefinite=Def|Gender=Masc\t2\tdet\t_\t_
2\tchat\tchat\tNOUN\t_\tGender=Masc|Number=Sing\t3\tnsubj\t_\t_
3\tdort\tdormir\tVERB\t_\t_\t0\troot\t_\tSpaceAfter=No
4\t.\t.\tPUNCT\t_\t_\t3\tpunct\t_\t_

# sent_id = 2
1-2\tdu\t_\t_\t_\t_\t_\t_\t_\t_
1\tde\tde\tADP\t_\t_\t3\tcase\t_\t_
2\tle\tle\tDET\t_\t_\t3\tdet\t_\t_
3\tpain\tpain\tNOUN\t_\t_\t0\troot\t_\tGloss=bread|Checked
3.1\tmange\tmanger\tVERB\t_\t_\t_\t_\t3:orphan\t_

"""

# ---------------------------------------------------------------------
# annotation
# ---------------------------------------------------------------------


class SentenceTest(unittest.TestCase):
    "tests for tbutil.annotation"

    def test_root(self):
        "node 0 is a token-less root"
        sent = mk_sentence(CAT_SLEEPS)
        self.assertEqual(5, len(sent))
        self.assertEqual(4, sent.nb_tokens())
        self.assertIsNone(sent[0])
        self.assertIsNone(sent.head(0))
        self.assertEqual(['the', 'cat', 'sleeps', '.'],
                         [x.form for x in sent.tokens()])

    def test_head(self):
        "edges are (head, relation) pairs"
        sent = mk_sentence(CAT_SLEEPS)
        self.assertEqual(Edge(2, 'det'), sent.head(1))
        self.assertEqual(Edge(0, 'root'), sent.head(3))
        sent.set_head(1, 3, 'dep')
        self.assertEqual(Edge(3, 'dep'), sent.head(1))

    def test_missing_head(self):
        "tokens may lack a head"
        sent = Sentence([Token('a'), Token('b')])
        self.assertIsNone(sent.head(1))
        self.assertIsNone(sent.head(2))

    def test_bad_lengths(self):
        "one head per token"
        self.assertRaises(ValueError, Sentence, [Token('a')], [0, 1])

    def test_token_maps(self):
        "feature maps keep their order and are read-only"
        tok = Token('chats', features=[('Number', 'Plur'),
                                       ('Gender', 'Masc')])
        self.assertEqual(['Number', 'Gender'], list(tok.features))
        self.assertRaises(TypeError, tok.features.__setitem__, 'Case', 'Nom')
        # but the form can be rewritten
        tok.form = 'chat'
        self.assertEqual('chat', tok.form)

    def test_map_strings(self):
        "string forms of feature and misc maps"
        self.assertEqual('', features_str({}))
        self.assertEqual('Number=Plur|Gender=Masc',
                         features_str({'Number': 'Plur', 'Gender': 'Masc'}))
        self.assertEqual('SpaceAfter=No|Checked',
                         misc_str({'SpaceAfter': 'No', 'Checked': None}))

    def test_to_conllu(self):
        "diagnostic rendering"
        sent = Sentence([Token('a', lemma='a'), Token('b')],
                        heads=[0, None], relations=['root', None])
        expected = ('1\ta\ta\t_\t_\t_\t0\troot\t_\t_\n'
                    '2\tb\t_\t_\t_\t_\t_\t_\t_\t_')
        self.assertEqual(expected, sent.to_conllu())

# ---------------------------------------------------------------------
# layers
# ---------------------------------------------------------------------


class LayerTest(unittest.TestCase):
    "tests for tbutil.layer"

    def setUp(self):
        self.token = Token('dort', lemma='dormir', upos='VERB',
                           features={'Mood': 'Ind', 'Person': '3'},
                           misc={'SpaceAfter': 'No', 'Checked': None})
        self.bare = Token('x')

    def test_resolve(self):
        "known names"
        self.assertEqual(Layer(LayerKind.FORM), resolve('form'))
        self.assertEqual(Layer(LayerKind.XPOS), resolve('xpos'))
        self.assertEqual(feature_layer('Case'), resolve('feature:Case'))
        self.assertEqual(misc_layer('SpaceAfter'), resolve('misc:SpaceAfter'))
        self.assertIsNone(resolve('pos'))
        self.assertIsNone(resolve('feature:'))
        self.assertIsNone(resolve(''))

    def test_name(self):
        "names round trip"
        for name in ['form', 'lemma', 'upos', 'xpos', 'features', 'misc',
                     'feature:Case', 'misc:Gloss']:
            self.assertEqual(name, resolve(name).name)

    def test_parse_layers(self):
        "order is kept"
        layers = parse_layers('upos,form,feature:Case')
        self.assertEqual(['upos', 'form', 'feature:Case'],
                         [x.name for x in layers])

    def test_parse_layers_unknown(self):
        "the first unknown name is reported"
        with self.assertRaises(UnknownLayerError) as cm:
            parse_layers('upos,bogus,other')
        self.assertEqual('bogus', cm.exception.name)
        self.assertIn('bogus', str(cm.exception))

    def test_extract(self):
        "plain layers"
        tok = self.token
        self.assertEqual('dort', extract(resolve('form'), tok))
        self.assertEqual('dormir', extract(resolve('lemma'), tok))
        self.assertEqual('VERB', extract(resolve('upos'), tok))
        self.assertIsNone(extract(resolve('xpos'), tok))
        self.assertEqual('Mood=Ind|Person=3',
                         extract(resolve('features'), tok))
        self.assertEqual('SpaceAfter=No|Checked',
                         extract(resolve('misc'), tok))

    def test_extract_maps_never_absent(self):
        "empty maps are empty strings"
        self.assertEqual('', extract(resolve('features'), self.bare))
        self.assertEqual('', extract(resolve('misc'), self.bare))

    def test_extract_keys(self):
        "absent keys, and misc keys without values, are absent"
        tok = self.token
        self.assertEqual('Ind', extract(feature_layer('Mood'), tok))
        self.assertIsNone(extract(feature_layer('Case'), tok))
        self.assertEqual('No', extract(misc_layer('SpaceAfter'), tok))
        self.assertIsNone(extract(misc_layer('Checked'), tok))
        self.assertIsNone(extract(misc_layer('Gloss'), tok))

# ---------------------------------------------------------------------
# reading
# ---------------------------------------------------------------------


class CorpusTest(unittest.TestCase):
    "tests for tbutil.corpus"

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def _write(self, name, text, compress=False):
        path = os.path.join(self.tmpdir, name)
        opener = gzip.open if compress else open
        with opener(path, 'wt', encoding='utf-8') as stream:
            stream.write(text)
        return path

    def test_read(self):
        "conversion from conllu token lists"
        path = self._write('sample.conllu', CONLLU_SAMPLE)
        sents = list(open_treebank(path))
        self.assertEqual(2, len(sents))
        sent1, sent2 = sents
        self.assertEqual(4, sent1.nb_tokens())
        tok = sent1[1]
        self.assertEqual('Le', tok.form)
        self.assertEqual('le', tok.lemma)
        self.assertEqual('DET', tok.upos)
        self.assertIsNone(tok.xpos)
        self.assertEqual([('Definite', 'Def'), ('Gender', 'Masc')],
                         list(tok.features.items()))
        self.assertEqual(Edge(2, 'det'), sent1.head(1))
        self.assertEqual('No', sent1[3].misc['SpaceAfter'])
        # multiword ranges and empty nodes are dropped
        self.assertEqual(['de', 'le', 'pain'],
                         [x.form for x in sent2.tokens()])
        self.assertEqual({'Gloss': 'bread', 'Checked': None},
                         dict(sent2[3].misc))

    def test_read_gzip(self):
        "gzipped files are read transparently"
        path = self._write('sample.conllu.gz', CONLLU_SAMPLE, compress=True)
        sents = list(open_treebank(path))
        self.assertEqual([4, 3], [x.nb_tokens() for x in sents])

    def test_missing_head(self):
        "_ as head means no head"
        text = u"1\ta\ta\tX\t_\t_\t_\t_\t_\t_\n\n"
        path = self._write('nohead.conllu', text)
        sent, = list(open_treebank(path))
        self.assertIsNone(sent.head(1))

    def test_read_failure(self):
        "parse errors end the stream with a ReadFailure"
        text = CONLLU_SAMPLE + u"abc\ta\ta\tX\t_\t_\t0\troot\t_\t_\n\n"
        path = self._write('broken.conllu', text)
        sents = list(open_treebank(path))
        self.assertIsInstance(sents[-1], ReadFailure)
        self.assertFalse(any(isinstance(x, ReadFailure) for x in sents[:-1]))

    def test_open_failure(self):
        "missing files are reported when opening"
        path = os.path.join(self.tmpdir, 'nope.conllu')
        with self.assertRaises(CorpusReadError) as cm:
            open_treebank(path, 'gold standard treebank')
        self.assertIn('gold standard treebank', str(cm.exception))
        self.assertIn(path, str(cm.exception))

    def test_misc_without_value(self):
        "misc keys without a value are present with an absent value"
        path = self._write('sample.conllu', CONLLU_SAMPLE)
        _, sent2 = list(open_treebank(path))
        tok = sent2[3]
        self.assertIsNone(extract(misc_layer('Checked'), tok))
        self.assertEqual('bread', extract(misc_layer('Gloss'), tok))
        self.assertEqual('Gloss=bread|Checked', extract(resolve('misc'), tok))

    def test_open_lazily(self):
        "the file is only opened once we start reading"
        path = self._write('sample.conllu', CONLLU_SAMPLE)
        sents = open_treebank(path)
        os.remove(path)
        first = next(sents)
        self.assertIsInstance(first, ReadFailure)
        self.assertEqual([], list(sents))

    def test_open_directory(self):
        "directories are not treebanks"
        with self.assertRaises(CorpusReadError):
            open_treebank(self.tmpdir)


# ---------------------------------------------------------------------
# dependency structure
# ---------------------------------------------------------------------


class StructureTest(unittest.TestCase):
    "tests for tbutil.structure"

    def test_graph(self):
        "edges go from heads to dependents"
        sent = mk_sentence(CAT_SLEEPS)
        graph = dependency_graph(sent)
        self.assertEqual(set(range(len(sent))), set(graph.nodes()))
        self.assertTrue(graph.has_edge(3, 2))
        self.assertTrue(graph.has_edge(0, 3))
        self.assertFalse(graph.has_edge(2, 3))
        self.assertEqual('nsubj', graph.edges[3, 2]['relation'])

    def test_tree(self):
        "no cycles in a tree"
        self.assertEqual([], find_cycles(mk_sentence(CAT_SLEEPS)))

    def test_cycles(self):
        "each cycle sorted, cycles by their first node"
        sent = mk_sentence([('a', 'X', 4, 'dep'),
                            ('b', 'X', 0, 'root'),
                            ('c', 'X', 1, 'dep'),
                            ('d', 'X', 3, 'dep'),
                            ('e', 'X', 6, 'dep'),
                            ('f', 'X', 5, 'dep')])
        self.assertEqual([[1, 3, 4], [5, 6]], find_cycles(sent))

    def test_self_loop(self):
        "a node governing itself is not a cycle"
        sent = mk_sentence([('a', 'X', 1, 'dep'),
                            ('b', 'X', 0, 'root')])
        self.assertEqual([], find_cycles(sent))

    def test_missing_head(self):
        "tokens without heads are simply not attached"
        sent = mk_sentence([('a', 'X', None, None),
                            ('b', 'X', 0, 'root')])
        self.assertEqual([], find_cycles(sent))
        self.assertEqual(0, dependency_graph(sent).in_degree(1))


# ---------------------------------------------------------------------
# alignment
# ---------------------------------------------------------------------


class AlignTest(unittest.TestCase):
    "tests for tbutil.align"

    def test_pairs(self):
        "pairs follow reading order"
        sent_a = mk_sentence(CAT_SLEEPS)
        sent_b = mk_sentence(CAT_SLEEPS[:3])
        pairs = list(aligned_pairs([sent_a, sent_b], [sent_a, sent_b]))
        self.assertEqual([(sent_a, sent_a), (sent_b, sent_b)], pairs)

    def test_zip_tail(self):
        "the tail of the longer treebank is ignored"
        sent = mk_sentence(CAT_SLEEPS)
        longer = [sent, sent, mk_sentence(CAT_SLEEPS[:1])]
        self.assertEqual(2, len(list(aligned_pairs([sent, sent], longer))))
        self.assertEqual(2, len(list(aligned_pairs(longer, [sent, sent]))))

    def test_length_mismatch(self):
        "both token counts are reported"
        sent3 = mk_sentence(CAT_SLEEPS[:3])
        sent4 = mk_sentence(CAT_SLEEPS)
        with self.assertRaises(AlignmentError) as cm:
            list(aligned_pairs([sent3], [sent4]))
        self.assertEqual((3, 4), cm.exception.lengths)
        self.assertIn('3 4', str(cm.exception))

    def test_read_failure(self):
        "read failures say which side broke"
        sent = mk_sentence(CAT_SLEEPS)
        failure = ReadFailure(ValueError('oops'))
        with self.assertRaises(CorpusReadError) as cm:
            list(aligned_pairs([sent], [failure]))
        self.assertIn('predicted', str(cm.exception))
        self.assertIn('oops', str(cm.exception))
        with self.assertRaises(CorpusReadError) as cm:
            list(aligned_pairs([failure], [sent], names=('first', 'second')))
        self.assertIn('first', str(cm.exception))

    def test_fail_fast(self):
        "nothing past the first error is produced"
        good = mk_sentence(CAT_SLEEPS)
        short = mk_sentence(CAT_SLEEPS[:2])
        pairs = aligned_pairs([good, good, good], [good, short, good])
        self.assertEqual((good, good), next(pairs))
        self.assertRaises(AlignmentError, next, pairs)

# ---------------------------------------------------------------------
# diffs
# ---------------------------------------------------------------------


class DiffTest(unittest.TestCase):
    "tests for tbutil.diff"

    def setUp(self):
        self.sent = mk_sentence(CAT_SLEEPS)
        rows = list(CAT_SLEEPS)
        rows[1] = ('cat', 'VERB', 3, 'nsubj')
        self.other = mk_sentence(rows)
        self.upos = parse_layers('upos')
        self.form = parse_layers('form')

    def test_identity(self):
        "a sentence does not differ from itself"
        layers = parse_layers('form,lemma,upos,xpos,features,misc')
        self.assertEqual(set(), diff_indices(self.sent, self.sent, layers))

    def test_locality(self):
        "only the differing position is reported"
        self.assertEqual({1}, diff_indices(self.sent, self.other, self.upos))
        self.assertEqual(set(), diff_indices(self.sent, self.other,
                                             self.form))
        self.assertEqual({1}, diff_indices(self.sent, self.other,
                                           parse_layers('form,upos')))

    def test_absent(self):
        "absent only matches absent"
        sent1 = Sentence([Token('a'), Token('b', lemma='b'), Token('c')])
        sent2 = Sentence([Token('a'), Token('b'), Token('c', lemma='_')])
        self.assertEqual({1, 2},
                         diff_indices(sent1, sent2, parse_layers('lemma')))

    def test_mismatch(self):
        "sentences must have the same length"
        self.assertRaises(AlignmentError, diff_indices,
                          self.sent, mk_sentence(CAT_SLEEPS[:2]), self.upos)

    def test_render(self):
        "show columns, then pairs of compared values"
        rows = render_diff(self.sent, self.other, self.upos, self.form)
        self.assertEqual(['1\tthe\tDET\tDET',
                          '2\tcat\tNOUN\tVERB',
                          '3\tsleeps\tVERB\tVERB',
                          '4\t.\tPUNCT\tPUNCT'],
                         [x.plain for x in rows])

    def test_render_highlight(self):
        "differing values (only) are highlighted"
        rows = render_diff(self.sent, self.other, self.upos, self.form)
        self.assertEqual([], rows[0].spans)
        highlighted = [rows[1].plain[x.start:x.end] for x in rows[1].spans
                       if x.style == MISMATCH_STYLE]
        self.assertEqual(['NOUN', 'VERB'], highlighted)

    def test_render_placeholder(self):
        "absent values are shown as _"
        sent1 = Sentence([Token('a', lemma='a')])
        sent2 = Sentence([Token('a')])
        row, = render_diff(sent1, sent2, parse_layers('lemma'),
                           parse_layers('xpos,form'))
        self.assertEqual('1\t_\ta\ta\t_', row.plain)
        self.assertEqual(2, len(row.spans))

    def test_render_literal_placeholder(self):
        "a literal _ differs from an absent value, and is highlighted"
        sent1 = Sentence([Token('a', lemma='_')])
        sent2 = Sentence([Token('a')])
        lemma = parse_layers('lemma')
        self.assertEqual({0}, diff_indices(sent1, sent2, lemma))
        row, = render_diff(sent1, sent2, lemma, [])
        self.assertEqual('1\t_\t_', row.plain)
        self.assertEqual(2, len(row.spans))

    def test_compare(self):
        "only differing sentences, each followed by a blank line"
        pairs = [(self.sent, self.sent), (self.sent, self.other)]
        rows = list(compare_treebanks(pairs, self.upos, self.form))
        self.assertEqual(5, len(rows))
        self.assertEqual('2\tcat\tNOUN\tVERB', rows[1].plain)
        self.assertEqual('', rows[-1].plain)

    def test_compare_identity(self):
        "nothing at all for identical treebanks"
        pairs = [(self.sent, self.sent), (self.other, self.other)]
        self.assertEqual([], list(compare_treebanks(pairs, self.upos,
                                                    self.form)))
