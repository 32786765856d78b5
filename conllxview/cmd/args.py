# License: BSD3

"""
Command line options
"""

import argparse
import os
import sys
import tempfile

from conllxview.annotation import LAYERS
from conllxview.conllx import DEFAULT_LAYOUT
from conllxview.corpus import Reader


def positive_int(string):
    """
    Integer greater than zero. Used for argparse
    """
    try:
        value = int(string)
    except ValueError:
        value = 0
    if value < 1:
        msg = "%r is not a positive integer" % string
        raise argparse.ArgumentTypeError(msg)
    return value


def add_usual_input_args(parser):
    """
    Augment a subcommand argparser with the input file, the column
    layout and the error handling options
    """
    parser.add_argument('input', metavar='FILE', nargs='?', default='-',
                        help='corpus file (default: stdin)')
    parser.add_argument('--layer', '-l',
                        choices=LAYERS,
                        default='form',
                        help='token field shown for each word '
                        '(default: form)')
    parser.add_argument('--skip-malformed', action='store_true',
                        help='leave malformed sentences out '
                        '(default: stop on the first one)')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='say what we are reading')

    psr_layout = parser.add_argument_group('column layout')
    psr_layout.add_argument('--minimal-arity', type=positive_int,
                            metavar='N',
                            default=DEFAULT_LAYOUT.minimal_arity,
                            help='columns in the minimal form '
                            '(default: %(default)s)')
    psr_layout.add_argument('--extended-arity', type=positive_int,
                            metavar='N',
                            default=DEFAULT_LAYOUT.extended_arity,
                            help='columns in the form with secondary '
                            'heads (default: %(default)s)')
    psr_layout.add_argument('--feature-sep', metavar='STR',
                            default=DEFAULT_LAYOUT.feature_sep,
                            help='separator between features '
                            '(default: %(default)s)')
    psr_layout.add_argument('--pair-sep', metavar='CHAR',
                            default=DEFAULT_LAYOUT.pair_sep,
                            help='separator between secondary heads '
                            '(default: %(default)s)')


def add_usual_output_args(parser):
    """
    Augment a subcommand argparser with the usual export options
    """
    parser.add_argument('--sentence', '-s', type=positive_int,
                        metavar='N',
                        help='only export sentence N (numbered as in '
                        'the input; default: all of them)')
    parser.add_argument('--output', '-o', metavar='DIR',
                        help='output directory (default: mktemp)')
    parser.add_argument('--stdout', action='store_true',
                        help='write to stdout instead of files')


def get_layout(args):
    """
    Column layout described by the command line arguments
    """
    layout = DEFAULT_LAYOUT._replace(minimal_arity=args.minimal_arity,
                                     extended_arity=args.extended_arity,
                                     feature_sep=args.feature_sep,
                                     pair_sep=args.pair_sep)
    try:
        return layout.check()
    except ValueError as err:
        sys.exit("Bad column layout: %s" % err)


def read_document(args):
    """
    Read the corpus specified in the command line arguments
    """
    reader = Reader(get_layout(args))
    return reader.read_file(args.input,
                            skip_malformed=args.skip_malformed,
                            verbose=args.verbose)


def get_output_dir(args):
    """Return the output dir specified or inferred from command
    line args.

    1. If `--output` is given explicitly, we'll just use/create that
    2. OK just make a temporary directory. Later on, you'll probably want
       to call `announce_output_dir`.
    """
    if args.output:
        if os.path.isfile(args.output):
            oops = "Sorry, %s already exists and is not a directory" %\
                args.output
            sys.exit(oops)
        elif not os.path.isdir(args.output):
            os.makedirs(args.output)
        return args.output
    else:
        return tempfile.mkdtemp()


def announce_output_dir(output_dir):
    """
    Tell the user where we saved the output
    """
    print("Output files written to", output_dir, file=sys.stderr)
