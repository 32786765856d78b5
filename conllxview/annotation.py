"""
In-memory representation of a dependency annotated corpus.

A `Document` is the ordered sequence of `Sentence` read from one
input stream. Each sentence holds its `Token` (in position order)
and the `Arc` between them. Arcs are either primary, in which case
they form a forest over the sentence (each token has at most one
primary head), or secondary, in which case they are extra governing
edges that make the structure a general directed graph.

All of these are immutable once built; see `conllxview.deptree`
for how they are built and checked.
"""

# License: BSD3

# pylint: disable=too-few-public-methods

from collections import namedtuple


PRIMARY = 'primary'
SECONDARY = 'secondary'

LAYERS = ('form', 'lemma', 'cpos', 'pos', 'headrel', 'pheadrel')
"""
Token fields which can be displayed as the word label
"""


class Token(namedtuple('Token',
                       ['position',
                        'form',
                        'lemma',
                        'cpos',
                        'pos',
                        'features',
                        'head',
                        'deprel',
                        'secondary',
                        'line'])):
    """
    A token of a sentence.

    Absent values are `None` (never the empty string). `head` is the
    position of the primary head, or `None` for a root. `secondary`
    is a tuple of `(head, label)` pairs (empty unless the sentence
    uses the extended column layout). `features` is an immutable
    mapping from feature names to values (`None` for a feature given
    without a value).
    """
    def is_root(self):
        "True if the token has no primary head"
        return self.head is None

    def layer(self, name):
        """
        Value of one of the display `LAYERS` for this token
        (`None` if the value is absent)
        """
        if name == 'headrel':
            return self.deprel
        elif name == 'pheadrel':
            labels = [lbl for _, lbl in self.secondary if lbl is not None]
            return '|'.join(labels) if labels else None
        elif name in LAYERS:
            return getattr(self, name)
        else:
            raise ValueError("Unknown layer: %s (expected one of %s)" %
                             (name, ', '.join(LAYERS)))

    def __str__(self):
        return "%d:%s" % (self.position, self.form)


class Arc(namedtuple('Arc', ['head', 'dependent', 'label', 'kind'])):
    """
    A directed edge between two token positions of a sentence
    """
    def is_primary(self):
        "True if this arc comes from the primary head column"
        return self.kind == PRIMARY

    def is_secondary(self):
        "True if this arc comes from the secondary heads column"
        return self.kind == SECONDARY

    def span(self):
        """
        Token positions covered by this arc, as a `(left, right)`
        pair
        """
        return (min(self.head, self.dependent),
                max(self.head, self.dependent))

    def __str__(self):
        return "%d -%s-> %d" % (self.head, self.label or '', self.dependent)


class Sentence(object):
    """
    Tokens of a sentence and the arcs between them.

    You probably want to build these with
    `conllxview.deptree.build_sentence` rather than by hand, as that
    is what checks the structure.

    Parameters
    ----------
    tokens : sequence of Token
        Tokens in position order.
    arcs : sequence of Arc
        Primary arcs in dependent position order, followed by the
        secondary arcs in dependent position order.
    ordinal : int, optional
        1-based position of the sentence within its document.
    """
    def __init__(self, tokens, arcs, ordinal=None):
        self._tokens = tuple(tokens)
        self._arcs = tuple(arcs)
        self._ordinal = ordinal
        self._roots = tuple(t.position for t in self._tokens if t.is_root())

    @property
    def tokens(self):
        "tuple of tokens in position order"
        return self._tokens

    @property
    def arcs(self):
        "tuple of arcs, primary ones first"
        return self._arcs

    @property
    def ordinal(self):
        "1-based position of the sentence in its document (may be None)"
        return self._ordinal

    @property
    def roots(self):
        "positions of the tokens with no primary head"
        return self._roots

    def __len__(self):
        return len(self._tokens)

    def __iter__(self):
        return iter(self._tokens)

    def __eq__(self, other):
        return (isinstance(other, Sentence) and
                self._tokens == other._tokens and
                self._arcs == other._arcs)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self._tokens, self._arcs))

    def __repr__(self):
        return 'Sentence(%r, ordinal=%r)' % (self.text(), self._ordinal)

    def token(self, position):
        "Token at the given (1-based) position"
        if position < 1 or position > len(self._tokens):
            raise IndexError("No token at position %d" % position)
        return self._tokens[position - 1]

    def primary_arcs(self):
        "arcs built from the head column"
        return [a for a in self._arcs if a.is_primary()]

    def secondary_arcs(self):
        "arcs built from the secondary heads column"
        return [a for a in self._arcs if a.is_secondary()]

    def dependents(self, position):
        """
        Positions of the primary dependents of a token, in left to
        right order
        """
        return [a.dependent for a in self._arcs
                if a.is_primary() and a.head == position]

    def words(self, layer='form'):
        "the chosen layer of each token, in position order"
        return [t.layer(layer) for t in self._tokens]

    def text(self):
        "surface text of the sentence (forms joined by spaces)"
        return ' '.join(t.form or '_' for t in self._tokens)


class Document(object):
    """
    Sentences read from one input stream.

    `skipped` holds the errors for the sentences which were left out
    when the document was read in a mode that skips malformed
    sentences (otherwise it is empty)
    """
    def __init__(self, sentences, skipped=()):
        self._sentences = tuple(sentences)
        self._skipped = tuple(skipped)

    @property
    def sentences(self):
        "tuple of sentences"
        return self._sentences

    @property
    def skipped(self):
        "errors for the sentences which could not be read"
        return self._skipped

    def __len__(self):
        return len(self._sentences)

    def __iter__(self):
        return iter(self._sentences)

    def __getitem__(self, idx):
        return self._sentences[idx]
