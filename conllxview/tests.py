# -*- coding: utf-8 -*-
#
# License: BSD3
# pylint: disable=too-many-public-methods, invalid-name

"""
Tests for conllxview
"""

import io
import os
import re
import shutil
import tempfile
import unittest

from frozendict import frozendict

from conllxview.analysis import AnalyzedArc, analyze, arcs_cross
from conllxview.annotation import (Arc, Document, Sentence,
                                   PRIMARY, SECONDARY)
from conllxview.conllx import (ColumnLayout, DEFAULT_LAYOUT,
                               DuplicateFeature,
                               InvalidHeadReference,
                               InvalidTokenPosition,
                               MalformedRecord,
                               iter_blocks, parse_block, parse_features,
                               parse_head, read_records, split_columns)
from conllxview.corpus import Reader, read_document
from conllxview.cursor import (Cursor, IndexOutOfRange, NoSentences,
                               NoSuchSentence)
from conllxview.deptree import (CyclicPrimaryHeads, EmptySentence,
                                HeadOutOfRange,
                                build_sentence, find_cycle,
                                parse_secondary_heads)
from conllxview.graph import dot_quote, to_dot
from conllxview.tikz import dimension, tex_escape, to_tikz, unit_distance

# ---------------------------------------------------------------------
# sample corpora
# ---------------------------------------------------------------------

DOG_BARKS = '\n'.join([
    '1 Dog _ N N _ 2 nsubj',
    '2 barks _ V V _ _ root',
    '',
])

# 3 -> 1 crosses 4 -> 2
NON_PROJECTIVE = '\n'.join([
    '1 A _ X X _ 3 a',
    '2 B _ X X _ 4 b',
    '3 C _ X X _ _ root',
    '4 D _ X X _ 3 c',
    '',
])

# 4 -> 1 crosses both 5 -> 2 and 5 -> 3
TANGLED = '\n'.join([
    '1 A _ X X _ 4 a',
    '2 B _ X X _ 5 b',
    '3 C _ X X _ 5 c',
    '4 D _ X X _ 5 d',
    '5 E _ X X _ _ root',
    '',
])

WANTS_TO_LEAVE = '\n'.join([
    '1\tJohn\tJohn\tN\tNNP\tNumber=Sing\t2\tnsubj\t3:nsubj:xsubj',
    '2\twants\twant\tV\tVBZ\t_\t0\troot\t_',
    '3\tleave\tleave\tV\tVB\tVerbForm=Inf\t2\txcomp\t_',
    '',
])

THREE_SENTENCES = '\n'.join([DOG_BARKS, NON_PROJECTIVE, TANGLED])


def read_one(text, **kwargs):
    "the first (and presumably only) sentence of a text"
    return read_document(text, **kwargs)[0]


# ---------------------------------------------------------------------
# records
# ---------------------------------------------------------------------


class RecordTest(unittest.TestCase):
    "tests for conllxview.conllx"

    def test_blocks(self):
        "blank lines separate sentences, however many of them"
        text = '\n\n1 a\n2 b\n\n\n  \n1 c\n'
        blocks = list(iter_blocks(text))
        self.assertEqual([1, 2], [b.ordinal for b in blocks])
        self.assertEqual([3, 4], [n for n, _ in blocks[0].lines])
        self.assertEqual([8], [n for n, _ in blocks[1].lines])

    def test_blocks_no_final_newline(self):
        blocks = list(iter_blocks('1 a\n2 b'))
        self.assertEqual(1, len(blocks))
        self.assertEqual(2, len(blocks[0].lines))

    def test_blocks_lazy(self):
        "works on any iterable of lines"
        stream = io.StringIO(DOG_BARKS + '\n' + DOG_BARKS)
        self.assertEqual(2, len(list(iter_blocks(stream))))

    def test_split_columns(self):
        "tabs win over spaces"
        line = '1\tbig dog\t_\tN\tN\t_\t0\troot\n'
        cols = split_columns(line)
        self.assertEqual(8, len(cols))
        self.assertEqual('big dog', cols[1])
        self.assertEqual(8, len(split_columns('1  a   _ N N _ 0  root')))

    def test_placeholder(self):
        rec = list(read_records(DOG_BARKS))[0][0]
        self.assertEqual('Dog', rec.form)
        self.assertIsNone(rec.lemma)
        self.assertEqual(frozendict(), rec.features)
        self.assertIsNone(rec.secondary)

    def test_head(self):
        self.assertEqual(3, parse_head('3'))
        self.assertIsNone(parse_head('0'))
        self.assertIsNone(parse_head('_'))
        for bad in ['x', '-1', '1.5']:
            self.assertRaises(InvalidHeadReference, parse_head, bad)

    def test_features(self):
        feats = parse_features('Case=Nom|Number=Sing|Foreign')
        self.assertEqual('Nom', feats['Case'])
        self.assertEqual('Sing', feats['Number'])
        self.assertIsNone(feats['Foreign'])
        self.assertEqual('a=b', parse_features('Odd=a=b')['Odd'])
        self.assertRaises(DuplicateFeature,
                          parse_features, 'Case=Nom|Case=Acc')
        self.assertRaises(MalformedRecord, parse_features, '=Nom')

    def test_arity_mismatch(self):
        "the first record decides on the number of columns"
        bad = '\n'.join([
            '1 Dog _ N N _ 2 nsubj _',
            '2 barks _ V V _ _ root',
            '',
        ])
        text = DOG_BARKS + '\n' + bad
        with self.assertRaises(MalformedRecord) as cm:
            list(read_records(text))
        err = cm.exception
        self.assertEqual(2, err.sentence)
        self.assertEqual(5, err.line)
        self.assertEqual(9, err.expected)
        self.assertEqual(8, err.actual)
        self.assertTrue(str(err).startswith('sentence 2, line 5: '))

    def test_unknown_arity(self):
        with self.assertRaises(MalformedRecord) as cm:
            list(read_records('1 Dog _ N N _ 0\n'))
        self.assertEqual((8, 9), cm.exception.expected)
        self.assertEqual(7, cm.exception.actual)
        self.assertEqual(1, cm.exception.line)

    def test_position(self):
        text = '1 a _ X X _ _ root\n3 b _ X X _ 1 dep\n'
        with self.assertRaises(InvalidTokenPosition) as cm:
            list(read_records(text))
        self.assertEqual(2, cm.exception.line)
        self.assertEqual(1, cm.exception.sentence)

    def test_bad_head_located(self):
        text = DOG_BARKS + '\n1 a _ X X _ x root\n'
        with self.assertRaises(InvalidHeadReference) as cm:
            list(read_records(text))
        self.assertEqual(2, cm.exception.sentence)
        self.assertEqual(4, cm.exception.line)

    def test_layout_check(self):
        self.assertEqual(DEFAULT_LAYOUT, DEFAULT_LAYOUT.check())
        bad_layouts = [
            DEFAULT_LAYOUT._replace(minimal_arity=7, extended_arity=8),
            DEFAULT_LAYOUT._replace(extended_arity=8),
            DEFAULT_LAYOUT._replace(placeholder=''),
            DEFAULT_LAYOUT._replace(pair_sep='||'),
        ]
        for layout in bad_layouts:
            self.assertRaises(ValueError, layout.check)

    def test_wide_layout(self):
        "extra columns of the minimal form are ignored"
        layout = ColumnLayout(10, 11, '_', '|', '=', '|', ':')
        block = list(iter_blocks('1 Dog _ N N _ 0 root _ _\n'))[0]
        recs = parse_block(block, layout)
        self.assertEqual(1, len(recs))
        self.assertIsNone(recs[0].head)
        self.assertIsNone(recs[0].secondary)

    def test_empty_edge_columns(self):
        "leading and trailing tabs make empty columns"
        cols = split_columns('1\tDog\t_\tN\tN\t_\t0\troot\t\n')
        self.assertEqual(9, len(cols))
        self.assertEqual('', cols[-1])
        texts = [
            '1\tDog\t_\tN\tN\t_\t2\tnsubj\t\n'
            '2\tbarks\t_\tV\tV\t_\t_\troot\t\n',
            '\t1\tDog\t_\tN\tN\t_\t0\troot\n',
        ]
        for text in texts:
            with self.assertRaises(MalformedRecord) as cm:
                list(read_records(text))
            self.assertEqual(1, cm.exception.line)


# ---------------------------------------------------------------------
# graph building
# ---------------------------------------------------------------------


class BuildTest(unittest.TestCase):
    "tests for conllxview.deptree"

    def build(self, text, ordinal=None):
        "sentence for the first block of a text"
        return build_sentence(list(read_records(text))[0], ordinal=ordinal)

    def test_simple(self):
        sent = self.build(DOG_BARKS)
        self.assertEqual(2, len(sent))
        self.assertEqual([1, 2], [t.position for t in sent])
        self.assertEqual((2,), sent.roots)
        self.assertEqual((Arc(2, 1, 'nsubj', PRIMARY),), sent.arcs)
        self.assertEqual([1], sent.dependents(2))
        self.assertEqual('Dog barks', sent.text())

    def test_empty(self):
        self.assertRaises(EmptySentence, build_sentence, [])

    def test_cycle(self):
        text = '1 a _ X X _ 2 dep\n2 b _ X X _ 1 dep\n'
        with self.assertRaises(CyclicPrimaryHeads) as cm:
            self.build(text, ordinal=4)
        self.assertEqual((1, 2), cm.exception.positions)
        self.assertEqual(4, cm.exception.sentence)
        self.assertEqual(1, cm.exception.line)

    def test_self_loop(self):
        text = '1 a _ X X _ _ root\n2 b _ X X _ 2 dep\n'
        with self.assertRaises(CyclicPrimaryHeads) as cm:
            self.build(text)
        self.assertEqual((2,), cm.exception.positions)
        self.assertEqual(2, cm.exception.line)

    def test_find_cycle(self):
        self.assertIsNone(find_cycle({1: 2, 2: None, 3: 2}))
        self.assertIsNone(find_cycle({1: None, 2: None}))
        self.assertEqual((2, 3, 4), find_cycle({1: 2, 2: 3, 3: 4, 4: 2}))

    def test_head_out_of_range(self):
        text = '1 a _ X X _ 3 dep\n2 b _ X X _ _ root\n'
        with self.assertRaises(HeadOutOfRange) as cm:
            self.build(text)
        self.assertEqual(3, cm.exception.head)
        self.assertEqual(2, cm.exception.length)
        self.assertEqual(1, cm.exception.line)

    def test_forest(self):
        "several roots are fine"
        sent = self.build('1 a _ X X _ _ r\n2 b _ X X _ _ r\n')
        self.assertEqual((1, 2), sent.roots)
        self.assertEqual((), sent.arcs)

    def test_secondary(self):
        sent = self.build(WANTS_TO_LEAVE)
        self.assertEqual((2,), sent.roots)
        self.assertEqual([Arc(2, 1, 'nsubj', PRIMARY),
                          Arc(2, 3, 'xcomp', PRIMARY)],
                         sent.primary_arcs())
        self.assertEqual([Arc(3, 1, 'nsubj:xsubj', SECONDARY)],
                         sent.secondary_arcs())
        john = sent.token(1)
        self.assertEqual(((3, 'nsubj:xsubj'),), john.secondary)
        self.assertEqual('nsubj:xsubj', john.layer('pheadrel'))
        self.assertEqual('nsubj', john.layer('headrel'))
        self.assertEqual('NNP', john.layer('pos'))
        self.assertEqual('Sing', john.features['Number'])
        self.assertIsNone(sent.token(2).layer('pheadrel'))
        self.assertRaises(ValueError, john.layer, 'colour')
        self.assertRaises(IndexError, sent.token, 4)

    def test_secondary_column(self):
        self.assertEqual([], parse_secondary_heads('_'))
        self.assertEqual([], parse_secondary_heads(None))
        self.assertEqual([(2, 'a'), (13, 'b:c')],
                         parse_secondary_heads('2:a|13:b:c'))
        for bad in ['x:a', '3', '3:', '2:a|', ':a']:
            self.assertRaises(InvalidHeadReference,
                              parse_secondary_heads, bad)

    def test_secondary_cycles_allowed(self):
        "secondary arcs may go against the primary ones"
        text = '\n'.join([
            '1 a _ X X _ _ root _',
            '2 b _ X X _ 1 dep 3:back',
            '3 c _ X X _ 2 dep 2:back',
            '',
        ])
        sent = self.build(text)
        self.assertEqual(2, len(sent.secondary_arcs()))

    def test_secondary_out_of_range(self):
        for head in ['0', '4']:
            text = '\n'.join([
                '1 a _ X X _ _ root _',
                '2 b _ X X _ 1 dep %s:x' % head,
                '',
            ])
            with self.assertRaises(HeadOutOfRange) as cm:
                self.build(text)
            self.assertEqual(2, cm.exception.line)

    def test_equality(self):
        self.assertEqual(self.build(DOG_BARKS), self.build(DOG_BARKS))
        self.assertNotEqual(self.build(DOG_BARKS), self.build(TANGLED))


# ---------------------------------------------------------------------
# analysis
# ---------------------------------------------------------------------


class AnalysisTest(unittest.TestCase):
    "tests for conllxview.analysis"

    def assertCross(self, expected, span1, span2):
        "crossing both ways round"
        arc1 = Arc(span1[0], span1[1], None, PRIMARY)
        arc2 = Arc(span2[1], span2[0], None, PRIMARY)
        self.assertEqual(expected, arcs_cross(arc1, arc2))
        self.assertEqual(expected, arcs_cross(arc2, arc1))

    def test_arcs_cross(self):
        self.assertCross(True, (1, 3), (2, 4))
        self.assertCross(True, (2, 5), (1, 3))
        # nested
        self.assertCross(False, (1, 4), (2, 3))
        # shared endpoints
        self.assertCross(False, (1, 2), (2, 3))
        self.assertCross(False, (1, 3), (1, 4))
        self.assertCross(False, (2, 4), (3, 4))
        # disjoint
        self.assertCross(False, (1, 2), (3, 4))

    def test_non_projective(self):
        anno = analyze(read_one(NON_PROJECTIVE))
        self.assertEqual([(1,), (0,), ()],
                         [a.crossings for a in anno.arcs])
        self.assertEqual([(0, 1)], anno.crossing_pairs())
        self.assertFalse(anno.is_projective())
        self.assertEqual([1, 2, 3, 4], anno.drawing_order())

    def test_projective(self):
        anno = analyze(read_one(DOG_BARKS))
        self.assertTrue(anno.is_projective())
        self.assertEqual([], anno.crossing_pairs())

    def test_order_independent(self):
        "crossing only depends on the set of arcs"
        sent = read_one(TANGLED)
        flipped = Sentence(sent.tokens, reversed(sent.arcs))
        flags = dict((a.arc, a.crossing)
                     for a in analyze(sent).arcs)
        flipped_flags = dict((a.arc, a.crossing)
                             for a in analyze(flipped).arcs)
        self.assertEqual(flags, flipped_flags)
        counts = dict((a.arc, a.n_crossings) for a in analyze(sent).arcs)
        self.assertEqual([2, 1, 1, 0], [counts[a] for a in sent.arcs])

    def test_analyze_twice(self):
        anno = analyze(read_one(DOG_BARKS))
        self.assertIs(anno, analyze(anno))
        self.assertRaises(TypeError, analyze, 'Dog barks')

    def test_drawing_order(self):
        "tokens are never reordered, even if forms sort differently"
        sent = read_one('1 z _ X X _ _ r\n2 a _ X X _ 1 d\n')
        self.assertEqual([1, 2], analyze(sent).drawing_order())


# ---------------------------------------------------------------------
# exporters
# ---------------------------------------------------------------------

_NODE_RE = re.compile(r'^\s*n\d+\s*\[')


def node_lines(dot):
    "node statements of some dot source"
    return [l for l in dot.splitlines() if _NODE_RE.match(l)]


def edge_lines(dot):
    "edge statements of some dot source"
    return [l for l in dot.splitlines() if '->' in l]


class DotTest(unittest.TestCase):
    "tests for conllxview.graph"

    def test_simple(self):
        dot = to_dot(read_one(DOG_BARKS))
        self.assertTrue(dot.lstrip().startswith('digraph'))
        nodes = node_lines(dot)
        edges = edge_lines(dot)
        self.assertEqual(2, len(nodes))
        self.assertEqual(1, len(edges))
        self.assertTrue(re.search(r'\bn2\s*->\s*n1\b', edges[0]))
        self.assertIn('label="nsubj"', edges[0])
        dog, barks = nodes
        self.assertIn('label="Dog"', dog)
        self.assertNotIn('shape=box', dog)
        self.assertIn('shape=box', barks)

    def test_deterministic(self):
        self.assertEqual(to_dot(read_one(TANGLED)),
                         to_dot(read_one(TANGLED)))

    def test_same_forms(self):
        "nodes are keyed on position, not on form"
        dot = to_dot(read_one('1 the _ D D _ 2 d\n2 the _ D D _ _ r\n'))
        self.assertEqual(2, len(node_lines(dot)))

    def test_quote(self):
        self.assertEqual('"plain"', dot_quote('plain'))
        self.assertEqual(r'"a\"b\\c"', dot_quote('a"b\\c'))
        self.assertEqual(r'"a\nb"', dot_quote('a\nb'))
        dot = to_dot(read_one('1 say"\\ _ V V _ _ root\n'))
        self.assertIn(r'label="say\"\\"', node_lines(dot)[0])

    def test_styles(self):
        dot = to_dot(read_one(NON_PROJECTIVE))
        self.assertEqual(2, len([l for l in edge_lines(dot)
                                 if 'color=red' in l]))
        dot = to_dot(read_one(WANTS_TO_LEAVE))
        edges = edge_lines(dot)
        self.assertEqual(3, len(edges))
        dashed = [l for l in edges if 'style=dashed' in l]
        self.assertEqual(1, len(dashed))
        self.assertTrue(re.search(r'\bn3\s*->\s*n1\b', dashed[0]))

    def test_layer(self):
        dot = to_dot(read_one(WANTS_TO_LEAVE), layer='lemma')
        self.assertIn('label="want"', node_lines(dot)[1])


class TikzTest(unittest.TestCase):
    "tests for conllxview.tikz"

    def test_simple(self):
        expected = '\n'.join([
            r'\begin{dependency}',
            r'  \begin{deptext}',
            r'    Dog \& barks \\',
            r'  \end{deptext}',
            r'  \deproot{2}{root}',
            r'  \depedge{2}{1}{nsubj}',
            r'\end{dependency}',
            '',
        ])
        self.assertEqual(expected, to_tikz(read_one(DOG_BARKS)))

    def test_standalone(self):
        tikz = to_tikz(read_one(DOG_BARKS), standalone=True)
        lines = tikz.splitlines()
        self.assertEqual(r'\documentclass{standalone}', lines[0])
        self.assertIn(r'\usepackage{tikz-dependency}', lines)
        self.assertEqual(r'\end{document}', lines[-1])

    def test_escape(self):
        self.assertEqual(r'a\_b\&c\%d\$e\#f\{g\}',
                         tex_escape('a_b&c%d$e#f{g}'))
        self.assertEqual(r'\textasciitilde{}\textasciicircum{}'
                         r'\textbackslash{}',
                         tex_escape('~^\\'))
        tikz = to_tikz(read_one('1 R&D _ N N _ _ r&d\n'))
        self.assertIn(r'    R\char38{}D \\', tikz)
        self.assertIn(r'\deproot{1}{r\&d}', tikz)

    def test_crossing(self):
        "the more crossings, the taller the arc"
        sent = read_one(TANGLED)
        units = [unit_distance(a) for a in analyze(sent).arcs]
        self.assertIsNone(units[-1])
        self.assertTrue(units[0] > units[1])
        self.assertEqual(units[1], units[2])
        tikz = to_tikz(sent).splitlines()
        self.assertIn(r'  \depedge[edge unit distance=4.5ex]{4}{1}{a}', tikz)
        self.assertIn(r'  \depedge[edge unit distance=3.75ex]{5}{2}{b}', tikz)
        self.assertIn(r'  \depedge{5}{4}{d}', tikz)

    def test_secondary(self):
        tikz = to_tikz(read_one(WANTS_TO_LEAVE))
        self.assertIn(r'\depedge[edge style={densely dashed}]'
                      r'{3}{1}{nsubj:xsubj}', tikz)

    def test_deterministic(self):
        self.assertEqual(to_tikz(read_one(THREE_SENTENCES)),
                         to_tikz(read_one(THREE_SENTENCES)))

    def test_dimension(self):
        "unit distances never come out in exponent notation"
        self.assertEqual('3.75ex', dimension(3.75))
        self.assertEqual('4.5ex', dimension(4.5))
        self.assertEqual('3ex', dimension(3.0))
        busy = AnalyzedArc(Arc(3, 1, 'x', PRIMARY), range(1333332))
        self.assertEqual('1000002ex', dimension(unit_distance(busy)))


# ---------------------------------------------------------------------
# reading and navigating
# ---------------------------------------------------------------------

BROKEN = '\n'.join([DOG_BARKS,
                    '1 a _ X X _ 2 dep\n2 b _ X X _ 1 dep\n',
                    TANGLED])


class ReaderTest(unittest.TestCase):
    "tests for conllxview.corpus"

    def test_slurp(self):
        doc = Reader().slurp(THREE_SENTENCES)
        self.assertEqual(3, len(doc))
        self.assertEqual([1, 2, 3], [s.ordinal for s in doc])
        self.assertEqual((), doc.skipped)
        for sent in doc:
            self.assertEqual(list(range(1, len(sent) + 1)),
                             [t.position for t in sent])

    def test_empty(self):
        self.assertEqual(0, len(Reader().slurp('')))
        self.assertEqual(0, len(Reader().slurp('\n\n  \n')))

    def test_strict(self):
        with self.assertRaises(CyclicPrimaryHeads) as cm:
            Reader().slurp(BROKEN)
        self.assertEqual(2, cm.exception.sentence)
        self.assertEqual(4, cm.exception.line)

    def test_lazy(self):
        "errors only show up once we get to them"
        sentences = Reader().sentences(BROKEN)
        self.assertEqual(2, len(next(sentences)))
        self.assertRaises(CyclicPrimaryHeads, next, sentences)

    def test_skip(self):
        with self.assertWarns(UserWarning):
            doc = Reader().slurp(BROKEN, skip_malformed=True)
        self.assertEqual(2, len(doc))
        self.assertEqual([1, 3], [s.ordinal for s in doc])
        self.assertEqual(1, len(doc.skipped))
        self.assertEqual(2, doc.skipped[0].sentence)

    def test_read_file(self):
        tdir = tempfile.mkdtemp()
        try:
            path = os.path.join(tdir, 'corpus.conll')
            with open(path, 'w', encoding='utf-8') as fout:
                fout.write(WANTS_TO_LEAVE)
            doc = Reader().read_file(path)
            self.assertEqual(1, len(doc))
            self.assertEqual('John wants leave', doc[0].text())
        finally:
            shutil.rmtree(tdir)

    def test_bad_layout(self):
        self.assertRaises(ValueError, Reader,
                          DEFAULT_LAYOUT._replace(minimal_arity=5))


class CursorTest(unittest.TestCase):
    "tests for conllxview.cursor"

    def setUp(self):
        self.cursor = Cursor(read_document(THREE_SENTENCES))
        self.seen = []
        self.cursor.connect_update(lambda c: self.seen.append(c.idx))

    def test_clamp(self):
        cursor = self.cursor
        cursor.previous()
        self.assertEqual(0, cursor.idx)
        cursor.next()
        cursor.next()
        cursor.next()
        self.assertEqual(2, cursor.idx)
        self.assertEqual("3 of 3", cursor.label())
        cursor.first()
        self.assertEqual(0, cursor.idx)
        cursor.last()
        self.assertEqual(2, cursor.idx)
        # every movement is announced, even the ones that go nowhere
        self.assertEqual([0, 1, 2, 2, 0, 2], self.seen)

    def test_jump(self):
        cursor = self.cursor
        cursor.jump(1)
        self.assertEqual(1, cursor.idx)
        self.assertEqual(2, cursor.current().ordinal)
        for bad in [-1, 3]:
            with self.assertRaises(IndexOutOfRange) as cm:
                cursor.jump(bad)
            self.assertEqual(bad, cm.exception.index)
            self.assertEqual(3, cm.exception.length)
        self.assertEqual(1, cursor.idx)
        self.assertEqual([1], self.seen)

    def test_empty(self):
        cursor = Cursor(Document([]))
        self.assertEqual("0 of 0", cursor.label())
        self.assertRaises(NoSentences, cursor.current)
        cursor.next()
        cursor.last()
        self.assertEqual(0, cursor.idx)
        self.assertRaises(NoSentences, cursor.export, 'dot')

    def test_export(self):
        cursor = self.cursor
        cursor.jump(2)
        self.assertEqual('s3.dot', cursor.export_filename('dot'))
        self.assertEqual('s3.tikz', cursor.export_filename('tikz'))
        self.assertEqual(to_dot(cursor.current()), cursor.export('dot'))
        self.assertEqual(to_tikz(cursor.current(), layer='pos'),
                         cursor.export('tikz', layer='pos'))
        self.assertRaises(ValueError, cursor.export, 'svg')

    def test_goto(self):
        "sentences are numbered as in the input, skipped ones included"
        with self.assertWarns(UserWarning):
            doc = Reader().slurp(BROKEN, skip_malformed=True)
        cursor = Cursor(doc)
        cursor.goto(3)
        self.assertEqual(1, cursor.idx)
        self.assertEqual(3, cursor.ordinal())
        self.assertEqual('s3.dot', cursor.export_filename('dot'))
        with self.assertRaises(NoSuchSentence) as cm:
            cursor.goto(2)
        self.assertTrue(cm.exception.skipped)
        with self.assertRaises(NoSuchSentence) as cm:
            cursor.goto(4)
        self.assertFalse(cm.exception.skipped)
        self.assertEqual(1, cursor.idx)

    def test_goto_by_hand(self):
        "sentences without an ordinal are numbered by position"
        sent = read_one(DOG_BARKS)
        cursor = Cursor(Document([Sentence(sent.tokens, sent.arcs)] * 2))
        cursor.goto(2)
        self.assertEqual(1, cursor.idx)
        self.assertEqual('s2.tikz', cursor.export_filename('tikz'))
