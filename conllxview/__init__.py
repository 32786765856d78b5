"""
The conllxview library reads dependency annotated corpora in the
CONLL-X family of columnar formats and turns their sentences into
graph descriptions for Graphviz (dot) and LaTeX (tikz-dependency).
It has a layered structure, each layer only using the ones below ::

          cursor                [navigation]
            |
     +------+------+
     |             |
     v             v
   graph         tikz           [export]
     |             |
     +------+------+
            |
            v
         analysis       corpus    [structure, reading]
            |             |
            |             v
            |    conllx -> deptree
            |             |
            +------+------+
                   v
              annotation        [data model]

* data model (`conllxview.annotation`): tokens, arcs, sentences and
  documents; all immutable

* reading (`conllxview.conllx`, `conllxview.deptree`,
  `conllxview.corpus`): text to token records, records to checked
  dependency graphs, and the two glued together

* structure (`conllxview.analysis`): which arcs cross which

* export (`conllxview.graph`, `conllxview.tikz`): dot and tikz
  source, identical for identical sentences

* navigation (`conllxview.cursor`): the current sentence of a
  document, for whatever display sits on top

Errors all derive from `conllxview.internalutil.ConllxViewException`.
"""

__version__ = '0.1'
