# -*- coding: utf-8 -*-
#
# License: BSD3

"""
Graphviz_ (dot) rendering of dependency graphs.

Classes of interest:

* DotGraph: the pydot graph for an (analysed) sentence; the
  `to_string()` method is most likely to be of interest here

* `to_dot`: shortcut returning the dot source directly

Nodes are named after token positions (`n1`, `n2`, ...) so that two
tokens with the same form never get mixed up. Nodes and edges are
always added in the same order (tokens by position, then primary
arcs, then secondary arcs) so that the same sentence always gives
the same text.

.. _Graphviz: https://graphviz.org
"""

import pydot

from .analysis import analyze

# pylint: disable=too-few-public-methods


def dot_quote(text):
    """
    Double quoted dot string for the given text.

    Backslashes and double quotes are escaped, line breaks are
    turned into dot's own ``\\n``
    """
    text = text.replace('\\', '\\\\')
    text = text.replace('"', '\\"')
    text = text.replace('\r\n', '\\n')
    text = text.replace('\n', '\\n')
    text = text.replace('\r', '\\n')
    return '"' + text + '"'


class DotGraph(pydot.Dot):
    """
    A dot representation of a sentence for visualisation.
    The `to_string()` method is most likely to be of interest here
    """

    def _node_id(self, position):
        return 'n%d' % position

    def _token_label(self, token):
        '''string to display for a token'''
        value = token.layer(self.layer)
        return '_' if value is None else value

    def _root_attrs(self):
        '''formatting options distinguishing root tokens'''
        return {'shape': 'box'}

    def _arc_attrs(self, anno):
        '''formatting options for an arc'''
        attrs = {}
        if anno.arc.label is not None:
            attrs['label'] = dot_quote(anno.arc.label)
        if anno.arc.is_secondary():
            attrs['style'] = 'dashed'
        if anno.crossing:
            attrs['color'] = 'red'
        return attrs

    def _add_token(self, token):
        attrs = {'label': dot_quote(self._token_label(token))}
        if token.is_root():
            attrs.update(self._root_attrs())
        self.add_node(pydot.Node(self._node_id(token.position), **attrs))

    def _add_arc(self, anno):
        attrs = self._arc_attrs(anno)
        self.add_edge(pydot.Edge(self._node_id(anno.arc.head),
                                 self._node_id(anno.arc.dependent),
                                 **attrs))

    def __init__(self, sentence, layer='form'):
        """
        Args

            sentence (Sentence or AnalyzedSentence): what to draw
            layer (string): token field to use as the node labels
        """
        self.core = analyze(sentence)
        self.layer = layer
        super(DotGraph, self).__init__('deptree', graph_type='digraph')
        self.set('charset', '"UTF-8"')
        self.set_node_defaults(shape='plaintext',
                               height='0',
                               width='0',
                               fontsize='12',
                               fontname='"Helvetica"')
        self.set_edge_defaults(color='"#4b0082"',
                               fontsize='8',
                               fontname='"Courier New"')

        for token in self.core.tokens:
            self._add_token(token)
        # the sentence keeps primary arcs before secondary ones
        for anno in self.core.arcs:
            self._add_arc(anno)


def to_dot(sentence, layer='form'):
    """
    Dot source for a sentence (analysing it first if need be)

    :rtype: string
    """
    return DotGraph(sentence, layer=layer).to_string()
