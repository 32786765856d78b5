# License: BSD3

"""
Step through a corpus with one-letter commands.

This is a line based stand-in for the keyboard bindings of a
graphical viewer; commands are read one per line ::

    n       next sentence
    p       previous sentence
    g N     go to sentence N (numbered as in the input)
    d       save the current sentence as dot (sN.dot)
    t       save the current sentence as tikz (sN.tikz)
    q       quit

The corpus and the commands cannot both come from stdin, so at least
one of them has to be given as a file.
"""

import sys

from conllxview.cursor import Cursor, NoSuchSentence

from .args import add_usual_input_args, read_document
from .output import save_export

NAME = 'browse'


def show(cursor, out=None):
    """
    Print where we are and the current sentence
    """
    print(cursor.label(), file=out)
    if len(cursor):
        print(cursor.current().text(), file=out)


def run_commands(cursor, commands, output_dir='.', layer='form',
                 out=None):
    """
    Apply each command (line) to the cursor; stops at `q`
    """
    cursor.connect_update(lambda c: show(c, out=out))
    cursor.first()
    for line in commands:
        parts = line.split()
        if not parts:
            continue
        cmd = parts[0]
        if cmd == 'q':
            break
        elif cmd == 'n':
            cursor.next()
        elif cmd == 'p':
            cursor.previous()
        elif cmd == 'g' and len(parts) == 2 and parts[1].isdigit():
            try:
                cursor.goto(int(parts[1]))
            except NoSuchSentence as err:
                print(err, file=sys.stderr)
        elif cmd in ('d', 't') and len(cursor):
            fmt = 'dot' if cmd == 'd' else 'tikz'
            path = save_export(cursor, output_dir, fmt, layer=layer)
            print("Saved tree to: %s" % path, file=out)
        else:
            print("Unknown command: %s" % line.strip(), file=sys.stderr)


def config_argparser(parser):
    """
    Subcommand flags.

    You should create and pass in the subparser to which the flags
    are to be added.
    """
    add_usual_input_args(parser)
    parser.add_argument('--commands', metavar='FILE', default='-',
                        help='file to read commands from (default: stdin, '
                        'in which case the corpus must be given as FILE)')
    parser.add_argument('--output', '-o', metavar='DIR', default='.',
                        help='where to save exports (default: .)')
    parser.set_defaults(func=main)


def main(args):
    """
    Subcommand main.

    You shouldn't need to call this yourself if you're using
    `config_argparser`
    """
    if args.input == '-' and args.commands == '-':
        sys.exit("Can't read both the corpus and the commands from stdin "
                 "(give the corpus as FILE or use --commands)")
    cursor = Cursor(read_document(args))
    if args.commands == '-':
        run_commands(cursor, sys.stdin, output_dir=args.output,
                     layer=args.layer)
    else:
        with open(args.commands, 'r', encoding='utf-8') as commands:
            run_commands(cursor, commands, output_dir=args.output,
                         layer=args.layer)
