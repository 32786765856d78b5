# License: BSD3

"""
Exception bases shared by the conllxview modules; not expected to be
too useful outside of it
"""


class ConllxViewException(Exception):
    """
    Root of the conllxview exceptions
    """
    def __init__(self, *args, **kw):
        Exception.__init__(self, *args, **kw)


class CorpusError(ConllxViewException):
    """
    Something wrong with the corpus text itself.

    Errors are attributed to the sentence they occur in (1-based
    ordinal in the document) and, where it makes sense, to a line of
    the input (1-based), so that they can be reported as
    ``sentence N, line M: <message>``.

    The sentence ordinal is usually unknown at the point where the
    problem is detected; the reader fills it in with `locate`.
    """
    def __init__(self, msg, sentence=None, line=None):
        self.msg = msg
        self.sentence = sentence
        self.line = line
        super(CorpusError, self).__init__(msg)

    def locate(self, sentence=None, line=None):
        """
        Fill in whichever of the sentence ordinal or line number
        is not yet known. Returns the error itself
        """
        if self.sentence is None:
            self.sentence = sentence
        if self.line is None:
            self.line = line
        return self

    def __str__(self):
        where = []
        if self.sentence is not None:
            where.append('sentence %d' % self.sentence)
        if self.line is not None:
            where.append('line %d' % self.line)
        if where:
            return '%s: %s' % (', '.join(where), self.msg)
        return self.msg
