#!/usr/bin/env python
# -*- coding: utf-8 -*-

# License: BSD3

"""
Build dependency graphs out of token records.

The primary head column gives us a forest (each root is its own
tree); the secondary heads column of the extended format adds
arbitrary extra arcs on top of it, which is what makes the result
a general directed graph rather than a tree.
"""

import funcparserlib.parser as fp

from .annotation import (Arc, Sentence, Token,
                         PRIMARY, SECONDARY)
from .conllx import DEFAULT_LAYOUT, InvalidHeadReference
from .internalutil import CorpusError


class EmptySentence(CorpusError):
    """
    Sentence without any tokens
    """
    pass


class HeadOutOfRange(CorpusError):
    """
    Head pointing outside of the sentence
    """
    def __init__(self, msg, head=None, length=None, **kwargs):
        self.head = head
        self.length = length
        super(HeadOutOfRange, self).__init__(msg, **kwargs)


class CyclicPrimaryHeads(CorpusError):
    """
    Following the primary heads from some token goes round in
    circles. `positions` are the (sorted) positions on the cycle
    """
    def __init__(self, msg, positions=(), **kwargs):
        self.positions = tuple(positions)
        super(CyclicPrimaryHeads, self).__init__(msg, **kwargs)


# ---------------------------------------------------------------------
# secondary heads - funcparserlib
# ---------------------------------------------------------------------


def _mkstr(chars):
    return "".join(chars)


def _cons(pair):
    head, tail = pair
    return [head] + tail


def _secondary_grammar(layout):
    """
    `head:label` pairs joined by `|` (or whatever the layout says).
    Labels may themselves contain the pair delimiter (eg. `nmod:poss`),
    we only split on its first occurrence
    """
    _digit = fp.some(lambda c: c in '0123456789')
    _head = fp.oneplus(_digit) >> _mkstr >> int
    _label = fp.oneplus(fp.some(lambda c: c != layout.pair_sep)) >> _mkstr
    _pair = _head + fp.skip(fp.a(layout.pair_delim)) + _label >> tuple
    _pairs = _pair + fp.many(fp.skip(fp.a(layout.pair_sep)) + _pair) >> _cons
    return _pairs + fp.skip(fp.finished)


def parse_secondary_heads(column, layout=DEFAULT_LAYOUT, line=None):
    """
    Secondary heads column as a list of `(head, label)` pairs
    (empty for the placeholder). Positions are not checked here.
    """
    if column is None or column == layout.placeholder:
        return []
    try:
        return _secondary_grammar(layout).parse(column)
    except fp.NoParseError as err:
        raise InvalidHeadReference("Invalid secondary heads %r (%s)" %
                                   (column, err),
                                   line=line)


# ---------------------------------------------------------------------
# building
# ---------------------------------------------------------------------


def find_cycle(heads):
    """
    Given a mapping from each position to its head (`None` for roots),
    return the sorted positions on the first cycle found (in position
    order), or `None` if following heads always ends at a root
    """
    done = set()
    for start in sorted(heads):
        path = []
        on_path = set()
        node = start
        while node is not None and node not in done:
            if node in on_path:
                return tuple(sorted(path[path.index(node):]))
            path.append(node)
            on_path.add(node)
            node = heads.get(node)
        done.update(path)
    return None


def _check_head(head, length, line, what='Head'):
    if not 1 <= head <= length:
        raise HeadOutOfRange("%s %d is outside of the sentence (1-%d)" %
                             (what, head, length),
                             head=head, length=length, line=line)


def build_sentence(records, ordinal=None, layout=DEFAULT_LAYOUT):
    """
    Check a block of token records and turn it into a `Sentence`.

    The first pass builds the primary arcs, checking that each head
    is within the sentence and that the primary heads do not form a
    cycle (so every non-empty sentence has at least one root). The
    second pass, for records in the extended form only, adds the
    secondary arcs; these are only checked for range.

    Parameters
    ----------
    records : sequence of TokenRecord
        Records of the sentence, in position order.
    ordinal : int, optional
        Position of the sentence in the document, used to report
        errors.
    layout : ColumnLayout, optional
        Dialect of the secondary heads column.

    Returns
    -------
    sentence : Sentence
    """
    records = list(records)
    try:
        if not records:
            raise EmptySentence("Sentence has no tokens")
        length = len(records)

        # pass 1: primary heads
        primary = []
        for rec in records:
            if rec.head is None:
                continue
            _check_head(rec.head, length, rec.line)
            primary.append(Arc(rec.head, rec.position, rec.deprel, PRIMARY))
        cycle = find_cycle(dict((r.position, r.head) for r in records))
        if cycle:
            raise CyclicPrimaryHeads("Cyclic primary heads between tokens "
                                     "%s" % ', '.join(str(p) for p in cycle),
                                     positions=cycle,
                                     line=records[cycle[0] - 1].line)

        # pass 2: secondary heads
        secondary = []
        per_token = []
        for rec in records:
            pairs = parse_secondary_heads(rec.secondary, layout, rec.line)
            for head, _ in pairs:
                _check_head(head, length, rec.line, what='Secondary head')
            secondary.extend(Arc(head, rec.position, label, SECONDARY)
                             for head, label in pairs)
            per_token.append(tuple(pairs))
    except CorpusError as err:
        raise err.locate(sentence=ordinal)

    tokens = [Token(position=rec.position,
                    form=rec.form,
                    lemma=rec.lemma,
                    cpos=rec.cpos,
                    pos=rec.pos,
                    features=rec.features,
                    head=rec.head,
                    deprel=rec.deprel,
                    secondary=pairs,
                    line=rec.line)
              for rec, pairs in zip(records, per_token)]
    return Sentence(tokens, primary + secondary, ordinal=ordinal)
