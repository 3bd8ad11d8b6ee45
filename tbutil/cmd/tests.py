# -*- coding: utf-8 -*-
#
# License: BSD3

"""
Tests for the tbutil command line
"""

from contextlib import redirect_stderr, redirect_stdout
import io
import os
import re
import shutil
import tempfile
import unittest

from tbutil.main import main

GOLD = u"""1\tKim\tKim\tPROPN\t_\tNumber=Sing\t2\tnsubj\t_\t_
2\teats\teat\tVERB\t_\tNumber=Sing|Tense=Pres\t0\troot\t_\t_
3\tapples\tapple\tNOUN\t_\tNumber=Plur\t2\tobj\t_\tSpaceAfter=No
4\t.\t.\tPUNCT\t_\t_\t2\tpunct\t_\t_

1\tIt\tit\tPRON\t_\t_\t2\tnsubj\t_\t_
2\trains\train\tVERB\t_\t_\t0\troot\t_\t_

"""

PREDICTED = u"""1\tKim\tKim\tPROPN\t_\tNumber=Sing\t2\tnsubj\t_\t_
2\teats\teat\tVERB\t_\tNumber=Sing\t0\troot\t_\t_
3\tapples\tapple\tVERB\t_\tNumber=Plur\t2\tdobj\t_\t_
4\t.\t.\tPUNCT\t_\t_\t3\tpunct\t_\t_

1\tIt\tit\tPRON\t_\t_\t2\tnsubj\t_\t_
2\trains\train\tVERB\t_\t_\t0\troot\t_\t_

"""

SHORT = u"""1\tKim\tKim\tPROPN\t_\t_\t2\tnsubj\t_\t_
2\teats\teat\tVERB\t_\t_\t0\troot\t_\t_
3\tapples\tapple\tNOUN\t_\t_\t2\tobj\t_\t_

"""

CYCLIC = u"""1\ta\ta\tX\t_\t_\t3\tdep\t_\t_
2\tb\tb\tX\t_\t_\t0\troot\t_\t_
3\tc\tc\tX\t_\t_\t1\tdep\t_\t_

1\tIt\tit\tPRON\t_\t_\t2\tnsubj\t_\t_
2\trains\train\tVERB\t_\t_\t0\troot\t_\t_

"""

CHECKED_GOLD = u"1\ta\ta\tX\t_\t_\t0\troot\t_\tChecked\n\n"

CHECKED_PREDICTED = u"1\ta\ta\tX\t_\t_\t0\troot\t_\t_\n\n"

ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;]*m')


class CommandTest(unittest.TestCase):
    "end-to-end runs of tbutil subcommands"

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.stderr = None
        self.gold = self._write('gold.conllu', GOLD)
        self.predicted = self._write('predicted.conllu', PREDICTED)
        self.short = self._write('short.conllu', SHORT)

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def _write(self, name, text):
        path = os.path.join(self.tmpdir, name)
        with open(path, 'w', encoding='utf-8') as stream:
            stream.write(text)
        return path

    def run_main(self, argv):
        "run tbutil, return its standard output"
        out = io.StringIO()
        with redirect_stdout(out), redirect_stderr(io.StringIO()):
            main(argv)
        return out.getvalue()

    def assertFails(self, argv):
        "tbutil should exit with an error and print nothing"
        out = io.StringIO()
        err = io.StringIO()
        with self.assertRaises(SystemExit) as cm:
            with redirect_stdout(out), redirect_stderr(err):
                main(argv)
        self.assertEqual('', out.getvalue())
        self.stderr = err.getvalue()
        self.assertNotEqual(0, cm.exception.code)
        return cm.exception

    # accuracy

    def test_layer_accuracy(self):
        "one summary line"
        out = self.run_main(['accuracy', '-l', 'upos',
                             self.gold, self.predicted])
        self.assertEqual('Accuracy: 83.33 (5/6)\n', out)

    def test_layer_list(self):
        "several layers at once"
        out = self.run_main(['accuracy', '--layer', 'form,upos,features',
                             self.gold, self.predicted])
        self.assertEqual('Accuracy: 88.89 (16/18)\n', out)

    def test_identity(self):
        "a treebank against itself"
        out = self.run_main(['accuracy', '-l', 'form,lemma,upos,xpos,misc',
                             self.gold, self.gold])
        self.assertEqual('Accuracy: 100.00 (30/30)\n', out)

    def test_feature_and_misc(self):
        "single feature or misc keys, with or without default"
        out = self.run_main(['accuracy', '-f', 'Tense',
                             self.gold, self.predicted])
        self.assertEqual('Accuracy: 83.33 (5/6)\n', out)
        out = self.run_main(['accuracy', '-f', 'Tense', '-d', 'Pres',
                             self.gold, self.predicted])
        self.assertEqual('Accuracy: 100.00 (6/6)\n', out)
        out = self.run_main(['accuracy', '-m', 'SpaceAfter',
                             self.gold, self.predicted])
        self.assertEqual('Accuracy: 83.33 (5/6)\n', out)

    def test_per_layer(self):
        "per-layer table after the summary"
        out = self.run_main(['accuracy', '-l', 'form,upos', '--per-layer',
                             self.gold, self.predicted])
        lines = out.splitlines()
        self.assertEqual('Accuracy: 91.67 (11/12)', lines[0])
        self.assertTrue(any(x.split()[:4] == ['upos', '83.33', '5', '6']
                            for x in lines[1:]))

    def test_attachment(self):
        "four tab-separated lines"
        out = self.run_main(['accuracy', '-a', self.gold, self.predicted])
        self.assertEqual(['LAS\t66.67\t4\t6',
                          'LASnp\t80.00\t4\t5',
                          'UAS\t83.33\t5\t6',
                          'UASnp\t100.00\t5\t5'],
                         out.splitlines())

    def test_unknown_layer(self):
        "unknown layers are rejected before reading anything"
        self.assertFails(['accuracy', '-l', 'upos,bogus',
                          self.gold, os.path.join(self.tmpdir, 'nope')])

    def test_exclusive_modes(self):
        "one evaluation mode at a time"
        self.assertFails(['accuracy', '-a', '-l', 'upos',
                          self.gold, self.predicted])
        self.assertFails(['accuracy', self.gold, self.predicted])

    def test_default_with_attachment(self):
        "--default makes no sense for attachment scores"
        err = self.assertFails(['accuracy', '-a', '-d', 'x',
                                self.gold, self.predicted])
        self.assertEqual(2, err.code)
        self.assertIn('usage: tbutil accuracy', self.stderr)
        self.assertIn('tbutil accuracy: error: argument --default/-d: '
                      'not allowed with argument --attachment/-a',
                      self.stderr)

    def test_per_layer_with_attachment(self):
        "--per-layer makes no sense for attachment scores either"
        err = self.assertFails(['accuracy', '-a', '--per-layer',
                                self.gold, self.predicted])
        self.assertEqual(2, err.code)
        self.assertIn('argument --per-layer: not allowed with argument '
                      '--attachment/-a', self.stderr)

    def test_misc_without_value(self):
        "a misc key without value counts as absent"
        gold = self._write('checked.conllu', CHECKED_GOLD)
        predicted = self._write('unchecked.conllu', CHECKED_PREDICTED)
        out = self.run_main(['accuracy', '-m', 'Checked', gold, predicted])
        self.assertEqual('Accuracy: 100.00 (1/1)\n', out)
        out = self.run_main(['accuracy', '-l', 'misc', gold, predicted])
        self.assertEqual('Accuracy: 0.00 (0/1)\n', out)

    def test_length_mismatch(self):
        "mismatched sentences abort with both lengths"
        err = self.assertFails(['accuracy', '-l', 'upos',
                                self.short, self.gold])
        self.assertIn('Different number of tokens: 3 4', str(err.code))

    def test_missing_file(self):
        "unreadable treebanks are reported"
        path = os.path.join(self.tmpdir, 'nope.conllu')
        err = self.assertFails(['accuracy', '-a', self.gold, path])
        self.assertIn('predicted treebank', str(err.code))

    # compare

    def test_compare(self):
        "differing sentences only, followed by a blank line"
        out = self.run_main(['compare', self.gold, self.predicted])
        out = ANSI_ESCAPE.sub('', out)
        self.assertEqual(['1\tKim\tPROPN\tPROPN',
                          '2\teats\tVERB\tVERB',
                          '3\tapples\tNOUN\tVERB',
                          '4\t.\tPUNCT\tPUNCT',
                          ''],
                         out.splitlines())

    def test_compare_layers(self):
        "show and compare several layers"
        out = self.run_main(['compare', '-l', 'upos,misc:SpaceAfter',
                             '-s', 'form,lemma', '--force-color',
                             self.gold, self.predicted])
        self.assertIn('\x1b[', out)
        out = ANSI_ESCAPE.sub('', out)
        lines = out.splitlines()
        self.assertEqual('3\tapples\tapple\tNOUN\tVERB\tNo\t_', lines[2])
        self.assertEqual('4\t.\t.\tPUNCT\tPUNCT\t_\t_', lines[3])

    def test_compare_identity(self):
        "no output for identical treebanks"
        out = self.run_main(['compare', '-l', 'form,upos,features',
                             self.gold, self.gold])
        self.assertEqual('', out)

    def test_compare_unknown_layer(self):
        "both layer lists are checked"
        self.assertFails(['compare', '-s', 'bogus',
                          self.gold, self.predicted])

    # cycle

    def test_cycle(self):
        "only sentences with cycles are shown"
        path = self._write('cyclic.conllu', CYCLIC)
        out = self.run_main(['cycle', path])
        self.assertEqual(['1\ta\ta\tX\t_\t_\t3\tdep\t_\t_',
                          '2\tb\tb\tX\t_\t_\t0\troot\t_\t_',
                          '3\tc\tc\tX\t_\t_\t1\tdep\t_\t_',
                          '',
                          'Cycle: 1, 3'],
                         out.splitlines())

    def test_cycle_tree(self):
        "no output for well-formed trees"
        self.assertEqual('', self.run_main(['cycle', self.gold]))

    def test_cycle_missing_file(self):
        "unreadable treebanks are reported"
        err = self.assertFails(['cycle',
                                os.path.join(self.tmpdir, 'nope.conllu')])
        self.assertIn('Cannot open treebank', str(err.code))

    # to-text

    def test_to_text(self):
        "one line of forms per sentence"
        out = self.run_main(['to-text', self.gold])
        self.assertEqual('Kim eats apples .\nIt rains\n', out)

    def test_to_text_layer(self):
        "other layers, with placeholders for absent values"
        out = self.run_main(['to-text', '-l', 'upos', self.gold])
        self.assertEqual('PROPN VERB NOUN PUNCT\nPRON VERB\n', out)
        out = self.run_main(['to-text', '-l', 'xpos', self.short])
        self.assertEqual('_ _ _\n', out)

    def test_to_text_bad_layer(self):
        "only textual layers"
        self.assertFails(['to-text', '-l', 'features', self.gold])
