"""
CONLL-X_ style columnar corpus files, as token records.

One token per line, sentences separated by one or more blank lines.
Columns are separated by tabs or, for lines without any tab, by runs
of spaces. The columns are, in order ::

    position form lemma cpos pos features head deprel [secondary]

The last column (secondary heads) only exists in the extended form
of the format. A column consisting solely of the placeholder `_`
has no value. Features are `key=value` pairs joined by `|`.

This module only deals with the records themselves; turning a block
of records into a checked dependency graph is the job of
`conllxview.deptree`.

.. _CONLL-X: https://ilk.uvt.nl/~emarsi/download/pubs/14964.pdf
"""

# License: BSD3

import io
import re
from collections import namedtuple

from frozendict import frozendict

from .internalutil import CorpusError

_POSITION = 0
_FORM = 1
_LEMMA = 2
_CPOS = 3
_POS = 4
_FEATS = 5
_HEAD = 6
_DEPREL = 7

_NUMBER_RE = re.compile(r'^[0-9]+$')

# ---------------------------------------------------------------------
# errors
# ---------------------------------------------------------------------


class MalformedRecord(CorpusError):
    """
    A token record we cannot make sense of.

    For wrong column counts, `expected` is the arity (or tuple of
    arities) we were looking for and `actual` the one we found
    """
    def __init__(self, msg, line=None, expected=None, actual=None,
                 sentence=None):
        self.expected = expected
        self.actual = actual
        super(MalformedRecord, self).__init__(msg, sentence=sentence,
                                              line=line)


class InvalidTokenPosition(MalformedRecord):
    """
    Position column which is not the next number in the sentence
    """
    pass


class DuplicateFeature(MalformedRecord):
    """
    Feature name given more than once for the same token
    """
    pass


class InvalidHeadReference(CorpusError):
    """
    Head which is neither the placeholder nor a number
    """
    pass


# ---------------------------------------------------------------------
# layouts
# ---------------------------------------------------------------------


class ColumnLayout(namedtuple('ColumnLayout',
                              ['minimal_arity',
                               'extended_arity',
                               'placeholder',
                               'feature_sep',
                               'feature_delim',
                               'pair_sep',
                               'pair_delim'])):
    """
    Dialect of the columnar format.

    Records have either `minimal_arity` columns or `extended_arity`
    columns (the last of which holds the secondary heads). Columns
    past the eighth in the minimal form are accepted but ignored.
    `feature_sep` joins `key<feature_delim>value` pairs in the
    features column; `pair_sep` joins `head<pair_delim>label` pairs
    in the secondary heads column.
    """
    def check(self):
        """
        Raise `ValueError` if this layout cannot work; returns
        the layout itself otherwise
        """
        if self.minimal_arity < _DEPREL + 1:
            raise ValueError("Need at least %d columns (got %d)" %
                             (_DEPREL + 1, self.minimal_arity))
        if self.extended_arity <= self.minimal_arity:
            raise ValueError("Extended arity (%d) must be larger than "
                             "the minimal one (%d)" %
                             (self.extended_arity, self.minimal_arity))
        for field in ['placeholder', 'feature_sep', 'feature_delim',
                      'pair_sep', 'pair_delim']:
            if not getattr(self, field):
                raise ValueError("Empty %s in column layout" % field)
        # the secondary heads grammar works one character at a time
        for field in ['pair_sep', 'pair_delim']:
            if len(getattr(self, field)) != 1:
                raise ValueError("%s must be a single character" % field)
        return self

    def arities(self):
        "column counts a record may have"
        return (self.minimal_arity, self.extended_arity)

    def value(self, column):
        "`None` for the placeholder, the column itself otherwise"
        return None if column == self.placeholder else column


DEFAULT_LAYOUT = ColumnLayout(minimal_arity=8,
                              extended_arity=9,
                              placeholder='_',
                              feature_sep='|',
                              feature_delim='=',
                              pair_sep='|',
                              pair_delim=':')


# ---------------------------------------------------------------------
# records
# ---------------------------------------------------------------------


class RecordBlock(namedtuple('RecordBlock', ['ordinal', 'lines'])):
    """
    Raw lines for one sentence: `lines` is a tuple of
    `(line_number, text)` pairs, `ordinal` the 1-based position of
    the sentence in the input
    """
    pass


class TokenRecord(namedtuple('TokenRecord',
                             ['line',
                              'position',
                              'form',
                              'lemma',
                              'cpos',
                              'pos',
                              'features',
                              'head',
                              'deprel',
                              'secondary'])):
    """
    One parsed line of the corpus.

    `head` is an int (`None` for no head). `secondary` is the raw
    secondary heads column for records in the extended form, and
    `None` for the minimal form.
    """
    pass


def iter_blocks(text):
    """
    Split corpus text into blocks of non-blank lines.

    This is lazy, so you can feed it an open file (or any iterable
    of lines) as well as a string.

    :rtype: iterator of RecordBlock
    """
    stream = io.StringIO(text) if isinstance(text, str) else text
    ordinal = 0
    current = []
    for lineno, line in enumerate(stream, start=1):
        if line.strip():
            current.append((lineno, line))
        elif current:
            ordinal += 1
            yield RecordBlock(ordinal, tuple(current))
            current = []
    if current:
        ordinal += 1
        yield RecordBlock(ordinal, tuple(current))


def split_columns(line):
    """
    Split a line into columns: on each tab if there are any,
    otherwise on runs of spaces. Leading and trailing tabs count,
    so that an empty first or last column is not lost
    """
    line = line.rstrip('\r\n')
    if '\t' in line:
        return line.split('\t')
    else:
        return line.split()


def parse_head(column, layout=DEFAULT_LAYOUT, line=None):
    """
    Primary head column as an int, `None` if there is no head.

    Both the placeholder and `0` (the usual CONLL way of pointing at
    the root) mean that there is no head.
    """
    if column == layout.placeholder:
        return None
    if not _NUMBER_RE.match(column):
        raise InvalidHeadReference("Invalid head %r (expected %s or a "
                                   "token position)" %
                                   (column, layout.placeholder),
                                   line=line)
    head = int(column)
    return head or None


def parse_features(column, layout=DEFAULT_LAYOUT, line=None):
    """
    Features column as an immutable mapping (which is empty for the
    placeholder). Features with no value are mapped to `None`.
    """
    if column == layout.placeholder:
        return frozendict()
    feats = {}
    for item in column.split(layout.feature_sep):
        if layout.feature_delim in item:
            key, value = item.split(layout.feature_delim, 1)
        else:
            key, value = item, None
        if not key:
            raise MalformedRecord("Empty feature name in %r" % column,
                                  line=line)
        if key in feats:
            raise DuplicateFeature("Feature %r given more than once" % key,
                                   line=line)
        feats[key] = value
    return frozendict(feats)


def parse_record(lineno, line, position, arity, layout=DEFAULT_LAYOUT):
    """
    Parse a single line, which is expected to be the record for the
    token at `position` and to have `arity` columns.

    :rtype: TokenRecord
    """
    cols = split_columns(line)
    if len(cols) != arity:
        raise MalformedRecord("Expected %d columns, got %d" %
                              (arity, len(cols)),
                              line=lineno, expected=arity,
                              actual=len(cols))
    if any(not c for c in cols):
        raise MalformedRecord("Empty column", line=lineno)
    if cols[_POSITION] != str(position):
        raise InvalidTokenPosition("Expected token position %d, got %r" %
                                   (position, cols[_POSITION]),
                                   line=lineno)
    if arity == layout.extended_arity:
        secondary = cols[layout.extended_arity - 1]
    else:
        secondary = None
    value = layout.value
    return TokenRecord(line=lineno,
                       position=position,
                       form=value(cols[_FORM]),
                       lemma=value(cols[_LEMMA]),
                       cpos=value(cols[_CPOS]),
                       pos=value(cols[_POS]),
                       features=parse_features(cols[_FEATS], layout, lineno),
                       head=parse_head(cols[_HEAD], layout, lineno),
                       deprel=value(cols[_DEPREL]),
                       secondary=secondary)


def parse_block(block, layout=DEFAULT_LAYOUT):
    """
    Token records for a block of lines.

    The first record fixes the number of columns for the whole block;
    it must be one of the layout arities.

    :rtype: tuple of TokenRecord
    """
    records = []
    arity = None
    for lineno, line in block.lines:
        try:
            if arity is None:
                arity = len(split_columns(line))
                if arity not in layout.arities():
                    raise MalformedRecord(
                        "Expected %d or %d columns, got %d" %
                        (layout.minimal_arity, layout.extended_arity, arity),
                        line=lineno, expected=layout.arities(),
                        actual=arity)
            records.append(parse_record(lineno, line, len(records) + 1,
                                        arity, layout))
        except CorpusError as err:
            raise err.locate(sentence=block.ordinal)
    return tuple(records)


def read_records(text, layout=DEFAULT_LAYOUT):
    """
    Lazily parse corpus text into tuples of token records, one tuple
    per sentence. Stops on the first malformed sentence; see
    `conllxview.corpus.Reader` if you would rather skip them.
    """
    for block in iter_blocks(text):
        yield parse_block(block, layout)
