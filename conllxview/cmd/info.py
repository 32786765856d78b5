# License: BSD3

"""
Summary of the sentences in a corpus: size, roots and crossing arcs
"""

from tabulate import tabulate

from conllxview.analysis import analyze

from .args import add_usual_input_args, read_document

NAME = 'info'

HEADERS = ['sentence', 'tokens', 'roots', 'arcs', 'secondary',
           'crossing', 'projective']


def sentence_row(sentence):
    """
    Table row for a sentence (see `HEADERS`)
    """
    analysed = analyze(sentence)
    return [sentence.ordinal,
            len(sentence),
            len(sentence.roots),
            len(sentence.arcs),
            len(sentence.secondary_arcs()),
            len([a for a in analysed.arcs if a.crossing]),
            'yes' if analysed.is_projective() else 'no']


def summary(document):
    """
    Table with a row per sentence and a row of totals
    """
    rows = [sentence_row(s) for s in document]
    n_proj = len([r for r in rows if r[-1] == 'yes'])
    totals = ['all together'] +\
        [sum(r[i] for r in rows) for i in range(1, len(HEADERS) - 1)] +\
        ['%d/%d' % (n_proj, len(rows))]
    rows.append(totals)
    return tabulate(rows, headers=HEADERS)


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_usual_input_args(parser)
    parser.set_defaults(func=main)


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    document = read_document(args)
    print(summary(document))
    for err in document.skipped:
        print("skipped: %s" % err)
