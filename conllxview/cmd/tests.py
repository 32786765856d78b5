# -*- coding: utf-8 -*-
#
# License: BSD3
# pylint: disable=too-many-public-methods, invalid-name

"""
Tests for the conllx-view command line
"""

import contextlib
import io
import os
import shutil
import tempfile
import unittest
import warnings

from conllxview.corpus import read_document
from conllxview.cursor import Cursor
from conllxview.tests import (BROKEN, DOG_BARKS, THREE_SENTENCES,
                              node_lines)

from . import main, mk_argparser
from .browse import run_commands
from .info import summary


class CmdTest(unittest.TestCase):
    "tests for conllxview.cmd"

    def setUp(self):
        self.tdir = tempfile.mkdtemp()
        self.corpus = self.write('corpus.conll', THREE_SENTENCES)

    def tearDown(self):
        shutil.rmtree(self.tdir)

    def write(self, name, text):
        "save some text in the scratch directory"
        path = os.path.join(self.tdir, name)
        with open(path, 'w', encoding='utf-8') as fout:
            fout.write(text)
        return path

    def run_main(self, argv):
        "stdout of a command, stderr being discarded"
        out = io.StringIO()
        with contextlib.redirect_stdout(out),\
                contextlib.redirect_stderr(io.StringIO()):
            main(argv)
        return out.getvalue()

    def test_argparser(self):
        psr = mk_argparser()
        args = psr.parse_args(['dot', 'x.conll', '-s', '2', '-l', 'lemma'])
        self.assertEqual('x.conll', args.input)
        self.assertEqual(2, args.sentence)
        self.assertEqual('lemma', args.layer)
        args = psr.parse_args(['info'])
        self.assertEqual('-', args.input)
        self.assertEqual(8, args.minimal_arity)
        with contextlib.redirect_stderr(io.StringIO()):
            self.assertRaises(SystemExit, psr.parse_args, [])
            self.assertRaises(SystemExit, psr.parse_args,
                              ['dot', '-s', '0'])
            self.assertRaises(SystemExit, psr.parse_args,
                              ['dot', '--layer', 'colour'])

    def test_dot(self):
        outdir = os.path.join(self.tdir, 'out')
        self.run_main(['dot', self.corpus, '-o', outdir])
        self.assertEqual(['s1.dot', 's2.dot', 's3.dot'],
                         sorted(os.listdir(outdir)))

    def test_one_sentence(self):
        outdir = os.path.join(self.tdir, 'out')
        self.run_main(['tikz', self.corpus, '-o', outdir, '-s', '2',
                       '--standalone'])
        self.assertEqual(['s2.tikz'], os.listdir(outdir))
        with open(os.path.join(outdir, 's2.tikz'), encoding='utf-8') as fin:
            self.assertIn(r'\documentclass{standalone}', fin.read())

    def test_stdout(self):
        out = self.run_main(['tikz', self.corpus, '-s', '1', '--stdout'])
        self.assertIn(r'Dog \& barks \\', out)
        out = self.run_main(['dot', self.corpus, '--stdout'])
        self.assertEqual(3, out.count('digraph'))

    def test_no_such_sentence(self):
        with contextlib.redirect_stderr(io.StringIO()):
            self.assertRaises(SystemExit, main,
                              ['dot', self.corpus, '-s', '4', '--stdout'])

    def test_malformed(self):
        broken = self.write('broken.conll', BROKEN)
        with contextlib.redirect_stderr(io.StringIO()):
            self.assertRaises(SystemExit, main, ['info', broken])
        with warnings.catch_warnings():
            warnings.simplefilter('ignore')
            out = self.run_main(['info', broken, '--skip-malformed'])
        self.assertIn('all together', out)
        self.assertIn('skipped: sentence 2, line 4', out)

    def test_bad_layout(self):
        with contextlib.redirect_stderr(io.StringIO()):
            self.assertRaises(SystemExit, main,
                              ['info', self.corpus,
                               '--minimal-arity', '9'])

    def test_info(self):
        table = summary(read_document(THREE_SENTENCES))
        lines = table.splitlines()
        self.assertIn('projective', lines[0])
        self.assertEqual(2 + 3 + 1, len(lines))
        self.assertIn('all together', lines[-1])
        self.assertIn('1/3', lines[-1])

    def test_browse(self):
        cursor = Cursor(read_document(THREE_SENTENCES))
        out = io.StringIO()
        commands = ['n', 'n', 'n', 'p', '', 'd', 'q', 'n']
        run_commands(cursor, commands, output_dir=self.tdir, out=out)
        self.assertEqual(1, cursor.idx)
        lines = out.getvalue().splitlines()
        labels = [l for l in lines if ' of ' in l]
        self.assertEqual(['1 of 3', '2 of 3', '3 of 3', '3 of 3', '2 of 3'],
                         labels)
        self.assertTrue(lines[-1].startswith('Saved tree to: '))
        self.assertTrue(os.path.exists(os.path.join(self.tdir, 's2.dot')))

    def test_browse_goto(self):
        cursor = Cursor(read_document(DOG_BARKS + '\n' + DOG_BARKS))
        out = io.StringIO()
        with contextlib.redirect_stderr(io.StringIO()) as err:
            run_commands(cursor, ['g 2', 'g 9', 'x'], out=out)
        self.assertEqual(1, cursor.idx)
        self.assertIn('Unknown command: x', err.getvalue())

    def test_browse_script(self):
        commands = self.write('commands', 'n\nt\n')
        out = self.run_main(['browse', self.corpus,
                             '--commands', commands, '-o', self.tdir])
        self.assertIn('2 of 3', out)
        self.assertTrue(os.path.exists(os.path.join(self.tdir, 's2.tikz')))

    def test_skipped_numbering(self):
        "info, --sentence and file names agree once sentences are skipped"
        broken = self.write('broken.conll', BROKEN)
        outdir = os.path.join(self.tdir, 'out')
        with warnings.catch_warnings():
            warnings.simplefilter('ignore')
            self.run_main(['dot', broken, '--skip-malformed', '-o', outdir])
            out = self.run_main(['dot', broken, '--skip-malformed',
                                 '-s', '3', '--stdout'])
            info = self.run_main(['info', broken, '--skip-malformed'])
            with contextlib.redirect_stderr(io.StringIO()):
                self.assertRaises(SystemExit, main,
                                  ['dot', broken, '--skip-malformed',
                                   '-s', '2', '--stdout'])
        self.assertEqual(['s1.dot', 's3.dot'], sorted(os.listdir(outdir)))
        # sentence 3 is the tangled one, with five tokens
        self.assertEqual(5, len(node_lines(out)))
        rows = [l.split()[0] for l in info.splitlines()[2:-2]]
        self.assertEqual(['1', '3'], rows)

    def test_browse_needs_a_file(self):
        with contextlib.redirect_stderr(io.StringIO()):
            self.assertRaises(SystemExit, main, ['browse'])
