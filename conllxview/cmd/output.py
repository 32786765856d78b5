# License: BSD3

"""
Writing exported sentences
"""

import os
import sys

from conllxview.cursor import Cursor, NoSuchSentence

from .args import announce_output_dir, get_output_dir, read_document


def save_export(cursor, output_dir, fmt, layer='form', **kwargs):
    """
    Write the current sentence of the cursor to `output_dir` (as
    `s<N>.<fmt>`); returns the path of the file
    """
    text = cursor.export(fmt, layer=layer, **kwargs)
    path = os.path.join(output_dir, cursor.export_filename(fmt))
    with open(path, 'w', encoding='utf-8') as fout:
        fout.write(text)
    return path


def export_main(args, fmt, **kwargs):
    """
    Shared main for the export subcommands: export either the sentence
    picked with `--sentence` or all of them
    """
    cursor = Cursor(read_document(args))
    if not len(cursor):
        print("Skipping %s (no sentences)" % args.input, file=sys.stderr)
        return
    if args.sentence is not None:
        try:
            cursor.goto(args.sentence)
        except NoSuchSentence as err:
            sys.exit(str(err))
        indices = [cursor.idx]
    else:
        indices = range(len(cursor))

    if args.stdout:
        for idx in indices:
            cursor.jump(idx)
            sys.stdout.write(cursor.export(fmt, layer=args.layer, **kwargs))
        return

    output_dir = get_output_dir(args)
    for idx in indices:
        cursor.jump(idx)
        path = save_export(cursor, output_dir, fmt, layer=args.layer,
                           **kwargs)
        if args.verbose:
            print("Saved tree to: %s" % path, file=sys.stderr)
    announce_output_dir(output_dir)
