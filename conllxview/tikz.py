# License: BSD3

"""
LaTeX rendering of dependency graphs using the `tikz-dependency`
package.

Words go in a `deptext` row in position order and arcs refer to them
by index (`\\depedge{head}{dependent}{label}`), so the drawing adapts
to however wide the words turn out to be. The height of an arc
grows with the distance between its ends (`edge unit distance`);
arcs that cross other arcs get a larger unit distance, the more so
the more arcs they cross, so that tangled regions stay readable.
"""

from .analysis import analyze

DEFAULT_UNIT = 3.0
"""
tikz-dependency's own default `edge unit distance` (in ex)
"""

CROSSING_STEP = 0.75
"""
Extra `edge unit distance` (in ex) for each arc crossed
"""

SECONDARY_STYLE = 'densely dashed'

_TEX_SPECIALS = {
    '\\': r'\textbackslash{}',
    '{': r'\{',
    '}': r'\}',
    '$': r'\$',
    '&': r'\&',
    '#': r'\#',
    '^': r'\textasciicircum{}',
    '_': r'\_',
    '%': r'\%',
    '~': r'\textasciitilde{}',
    '\n': ' ',
    '\r': ' ',
}

# within deptext, \& is the cell separator
_CELL_SPECIALS = dict(_TEX_SPECIALS)
_CELL_SPECIALS['&'] = r'\char38{}'


def tex_escape(text, specials=None):
    """
    Escape the characters that mean something to LaTeX
    """
    specials = _TEX_SPECIALS if specials is None else specials
    return ''.join(specials.get(c, c) for c in text)


def _cell(token, layer):
    value = token.layer(layer)
    return tex_escape('_' if value is None else value, _CELL_SPECIALS)


def unit_distance(anno):
    """
    `edge unit distance` (in ex) for an analysed arc, or `None` if
    the default is fine (ie. the arc does not cross anything)
    """
    if anno.projective:
        return None
    return DEFAULT_UNIT + CROSSING_STEP * anno.n_crossings


def dimension(unit):
    """
    TeX dimension for a unit distance in ex, eg. `3.75ex`; never in
    exponent notation, which TeX cannot read
    """
    return ('%.2f' % unit).rstrip('0').rstrip('.') + 'ex'


def _edge_options(anno):
    opts = []
    unit = unit_distance(anno)
    if unit is not None:
        opts.append('edge unit distance=%s' % dimension(unit))
    if anno.arc.is_secondary():
        opts.append('edge style={%s}' % SECONDARY_STYLE)
    return '[%s]' % ', '.join(opts) if opts else ''


def _depedge(anno):
    label = anno.arc.label
    return r'\depedge%s{%d}{%d}{%s}' % (_edge_options(anno),
                                         anno.arc.head,
                                         anno.arc.dependent,
                                         tex_escape(label or ''))


def tikz_lines(sentence, layer='form'):
    """
    Lines of the `dependency` environment for a sentence
    """
    analysed = analyze(sentence)
    cells = [_cell(t, layer) for t in analysed.tokens]
    lines = [r'\begin{dependency}',
             r'  \begin{deptext}',
             r'    %s \\' % r' \& '.join(cells),
             r'  \end{deptext}']
    for position in analysed.roots:
        label = analysed.sentence.token(position).deprel
        lines.append(r'  \deproot{%d}{%s}' % (position,
                                               tex_escape(label or '')))
    for anno in analysed.arcs:
        lines.append('  ' + _depedge(anno))
    lines.append(r'\end{dependency}')
    return lines


def to_tikz(sentence, layer='form', standalone=False):
    """
    tikz-dependency source for a sentence (analysing it first if need
    be). With `standalone`, wrap it in a minimal LaTeX document.

    :rtype: string
    """
    lines = tikz_lines(sentence, layer=layer)
    if standalone:
        lines = ([r'\documentclass{standalone}',
                  r'\usepackage{tikz-dependency}',
                  r'\begin{document}'] +
                 lines +
                 [r'\end{document}'])
    return '\n'.join(lines) + '\n'
