# License: BSD3

"""
Structural facts about a sentence that the exporters need:
drawing order and which arcs cross each other (non-projectivity).

Crossing is computed over all arcs, primary and secondary alike.
"""

from collections import namedtuple

from .annotation import Sentence


def arcs_cross(arc1, arc2):
    """
    True if the spans of the two arcs properly cross, ie. each span
    has exactly one endpoint strictly inside the other ::

        a   c   b   d
        +-------+
            +-------+

    Arcs which share an endpoint, or where one span is nested in the
    other, do not cross.
    """
    left1, right1 = arc1.span()
    left2, right2 = arc2.span()
    return (left1 < left2 < right1 < right2 or
            left2 < left1 < right2 < right1)


class AnalyzedArc(namedtuple('AnalyzedArc', ['arc', 'crossings'])):
    """
    An arc along with the (sorted) indices of the arcs it crosses,
    indices being relative to the arc order of the sentence
    """
    @property
    def crossing(self):
        "True if the arc crosses some other arc"
        return bool(self.crossings)

    @property
    def projective(self):
        "True if the arc does not cross any other arc"
        return not self.crossings

    @property
    def n_crossings(self):
        "number of other arcs this one crosses"
        return len(self.crossings)


class AnalyzedSentence(object):
    """
    A sentence with its arcs annotated for crossing.

    Proxies the usual `Sentence` accessors so that it can be handed
    around in its place.
    """
    def __init__(self, sentence, arcs):
        self.sentence = sentence
        self.arcs = tuple(arcs)

    @property
    def tokens(self):
        "tokens of the underlying sentence"
        return self.sentence.tokens

    @property
    def roots(self):
        "positions of the root tokens"
        return self.sentence.roots

    @property
    def ordinal(self):
        "position of the sentence in its document"
        return self.sentence.ordinal

    def __len__(self):
        return len(self.sentence)

    def __iter__(self):
        return iter(self.sentence)

    def drawing_order(self):
        """
        Token positions from left to right. This is simply the order
        of the tokens in the sentence; it is never sorted on content
        """
        return [t.position for t in self.sentence.tokens]

    def crossing_pairs(self):
        "sorted `(i, j)` pairs (with `i < j`) of arc indices which cross"
        return [(i, j) for i, anno in enumerate(self.arcs)
                for j in anno.crossings if i < j]

    def is_projective(self):
        "True if no arc crosses another"
        return all(a.projective for a in self.arcs)


def analyze(sentence):
    """
    Annotate every arc of a sentence with the arcs it crosses.

    Every pair of arcs is compared, and `arcs_cross` is symmetric,
    so the result only depends on the set of arcs (if arc A is
    crossing B, B is crossing A whatever order we look at them in).

    :type sentence: Sentence
    :rtype: AnalyzedSentence
    """
    if isinstance(sentence, AnalyzedSentence):
        return sentence
    if not isinstance(sentence, Sentence):
        raise TypeError("Can only analyze a Sentence (got %s)" %
                        type(sentence).__name__)
    arcs = sentence.arcs
    crossings = [[] for _ in arcs]
    for i, arc1 in enumerate(arcs):
        for j in range(i + 1, len(arcs)):
            if arcs_cross(arc1, arcs[j]):
                crossings[i].append(j)
                crossings[j].append(i)
    return AnalyzedSentence(sentence,
                            [AnalyzedArc(arc, tuple(sorted(xs)))
                             for arc, xs in zip(arcs, crossings)])
