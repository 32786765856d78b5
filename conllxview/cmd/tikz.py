# License: BSD3

"""
Export sentences as tikz-dependency source
"""

from .args import add_usual_input_args, add_usual_output_args
from .output import export_main

NAME = 'tikz'


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_usual_input_args(parser)
    add_usual_output_args(parser)
    parser.add_argument('--standalone', action='store_true',
                        help='wrap each sentence in a LaTeX document')
    parser.set_defaults(func=main)


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    export_main(args, 'tikz', standalone=args.standalone)
