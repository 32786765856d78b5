# License: BSD3

"""
Position of the viewer within a document.

The cursor is the only mutable piece of the viewer state: the
document it wraps never changes, the cursor just moves over it.
Stepping past either end of the document is a no-op (the position
is clamped rather than wrapped around).
"""

from .graph import to_dot
from .internalutil import ConllxViewException
from .tikz import to_tikz

EXPORTERS = {
    'dot': to_dot,
    'tikz': to_tikz,
}


class NavigationError(ConllxViewException):
    """
    Asking the cursor for something it cannot do
    """
    pass


class IndexOutOfRange(NavigationError):
    """
    Jumping to a sentence which does not exist
    """
    def __init__(self, index, length):
        self.index = index
        self.length = length
        super(IndexOutOfRange, self).__init__(
            "Index %d is out of range (document has %d sentences)" %
            (index, length))


class NoSuchSentence(NavigationError):
    """
    Asking for a sentence number (as numbered in the input) which
    is not in the document. `skipped` is True if the sentence was
    left out for being malformed
    """
    def __init__(self, ordinal, skipped=False):
        self.ordinal = ordinal
        self.skipped = skipped
        if skipped:
            msg = "Sentence %d was skipped (malformed)" % ordinal
        else:
            msg = "No sentence %d in the input" % ordinal
        super(NoSuchSentence, self).__init__(msg)


class NoSentences(NavigationError):
    """
    Asking for the current sentence of an empty document
    """
    def __init__(self):
        super(NoSentences, self).__init__("Document has no sentences")


class Cursor(object):
    """
    A document and a current position (0-based) in it.

    Callbacks registered with `connect_update` are called with the
    cursor after each movement (including the ones that end up not
    moving, eg. `next()` on the last sentence), which is how a
    display would know to redraw.
    """
    def __init__(self, document):
        self.document = document
        self._idx = 0
        self._callbacks = []

    @property
    def idx(self):
        "current position"
        return self._idx

    def __len__(self):
        return len(self.document)

    def connect_update(self, callback):
        "Call `callback(cursor)` after every movement"
        self._callbacks.append(callback)

    def _updated(self):
        for callback in self._callbacks:
            callback(self)

    def _set_idx(self, idx):
        if 0 <= idx < len(self.document):
            self._idx = idx
        self._updated()

    def first(self):
        "go to the first sentence"
        self._set_idx(0)

    def last(self):
        "go to the last sentence"
        self._set_idx(len(self.document) - 1)

    def next(self):
        "go to the next sentence (stay put on the last one)"
        self._set_idx(self._idx + 1)

    def previous(self):
        "go to the previous sentence (stay put on the first one)"
        self._set_idx(self._idx - 1)

    def jump(self, idx):
        """
        Go to the sentence at position `idx`

        :raises IndexOutOfRange: if there is no such sentence
        """
        if not 0 <= idx < len(self.document):
            raise IndexOutOfRange(idx, len(self.document))
        self._set_idx(idx)

    def _ordinal(self, idx):
        ordinal = self.document[idx].ordinal
        return idx + 1 if ordinal is None else ordinal

    def goto(self, ordinal):
        """
        Go to the sentence with the given number, sentences being
        numbered as in the input (so skipped sentences keep their
        number, see `Sentence.ordinal`)

        :raises NoSuchSentence: if there is no such sentence
        """
        for idx in range(len(self.document)):
            if self._ordinal(idx) == ordinal:
                self._set_idx(idx)
                return
        skipped = ordinal in [e.sentence for e in self.document.skipped]
        raise NoSuchSentence(ordinal, skipped=skipped)

    def ordinal(self):
        """
        Number of the current sentence in the input

        :raises NoSentences: if the document is empty
        """
        if not len(self.document):
            raise NoSentences()
        return self._ordinal(self._idx)

    def current(self):
        """
        The sentence at the current position

        :raises NoSentences: if the document is empty
        """
        if not len(self.document):
            raise NoSentences()
        return self.document[self._idx]

    def label(self):
        "position as shown to the user, eg. '3 of 10'"
        if not len(self.document):
            return "0 of 0"
        return "%d of %d" % (self._idx + 1, len(self.document))

    def export(self, fmt, layer='form', **kwargs):
        """
        Current sentence as `dot` or `tikz` source
        """
        if fmt not in EXPORTERS:
            raise ValueError("Unknown export format: %s (expected one of "
                             "%s)" % (fmt, ', '.join(sorted(EXPORTERS))))
        return EXPORTERS[fmt](self.current(), layer=layer, **kwargs)

    def export_filename(self, fmt):
        """
        File name for an export of the current sentence, eg. s3.dot
        for the third sentence of the input
        """
        return "s%d.%s" % (self.ordinal(), fmt)
