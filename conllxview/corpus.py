# License: BSD3

"""
Corpus reading: from raw text (or a file) to a `Document`.

.. code-block:: python

    reader = Reader()
    doc = reader.slurp(text)                        # fail on bad input
    doc = reader.slurp(text, skip_malformed=True)   # or leave it out

Reading stops at the first malformed sentence unless you ask for
malformed sentences to be skipped; either way we never try to guess
what a malformed sentence was meant to be.
"""

import sys
import warnings

from .annotation import Document
from .conllx import DEFAULT_LAYOUT, iter_blocks, parse_block
from .deptree import build_sentence
from .internalutil import CorpusError


class Reader(object):
    """
    Reads sentences in a given column layout

    :param layout: dialect of the input
    :type layout: conllxview.conllx.ColumnLayout
    """
    def __init__(self, layout=DEFAULT_LAYOUT):
        self.layout = layout.check()

    def _sentences(self, text):
        """
        Sentences (or the error for each malformed one), lazily
        """
        for block in iter_blocks(text):
            try:
                records = parse_block(block, self.layout)
                yield build_sentence(records, ordinal=block.ordinal,
                                     layout=self.layout)
            except CorpusError as err:
                yield err.locate(sentence=block.ordinal)

    def sentences(self, text):
        """
        Lazily read the sentences of a corpus text (or any iterable of
        lines). Raises on the first malformed sentence.
        """
        for item in self._sentences(text):
            if isinstance(item, CorpusError):
                raise item
            yield item

    def slurp(self, text, skip_malformed=False, verbose=False):
        """
        Read all of a corpus text.

        Parameters
        ----------
        text : str or iterable of str
            Corpus text, or its lines.
        skip_malformed : boolean, defaults to False
            If True, leave malformed sentences out (with a warning);
            otherwise the first one raises its error.
        verbose : boolean, defaults to False
            If True, print what we're reading to stderr.

        Returns
        -------
        doc : Document
        """
        sentences = []
        skipped = []
        for item in self._sentences(text):
            if isinstance(item, CorpusError):
                if not skip_malformed:
                    raise item
                warnings.warn("Skipping malformed sentence (%s)" % item)
                skipped.append(item)
                continue
            sentences.append(item)
            if verbose and len(sentences) % 1000 == 0:
                print("Read %d sentences..." % len(sentences),
                      file=sys.stderr)
        if verbose:
            print("Read %d sentences (%d skipped)" %
                  (len(sentences), len(skipped)), file=sys.stderr)
        return Document(sentences, skipped)

    def read_file(self, path, **kwargs):
        """
        Read a UTF-8 corpus file (`-` for stdin); takes the same
        keyword arguments as `slurp`
        """
        if path == '-':
            return self.slurp(sys.stdin, **kwargs)
        with open(path, 'r', encoding='utf-8') as stream:
            return self.slurp(stream, **kwargs)


def read_document(text, layout=DEFAULT_LAYOUT, **kwargs):
    """
    Shortcut for `Reader(layout).slurp(text, **kwargs)`
    """
    return Reader(layout).slurp(text, **kwargs)
