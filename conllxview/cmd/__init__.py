"""
conllx-view subcommands
"""

# License: BSD3

import argparse
import sys

from conllxview.internalutil import ConllxViewException

from . import (browse,
               dot,
               info,
               tikz)

# at the time of this writing argparse doesn't support a way to group
# subcommands into sections, so we abuse the epilog
SUBCOMMAND_SECTIONS = [
    ('Viewing', [
        browse,
        info,
    ]),
    ('Export', [
        dot,
        tikz,
    ]),
]

SUBCOMMANDS = []
for descr, section in SUBCOMMAND_SECTIONS:
    SUBCOMMANDS.extend(section)


def mk_argparser():
    """
    Argument parser with one subparser per subcommand
    """
    epilog = '\n'.join('%s: %s' % (descr, ', '.join(m.NAME for m in section))
                       for descr, section in SUBCOMMAND_SECTIONS)
    psr = argparse.ArgumentParser(
        description='view and export dependency annotated sentences',
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter)
    subparsers = psr.add_subparsers(dest='subcommand')
    subparsers.required = True
    for module in SUBCOMMANDS:
        summary = module.__doc__.strip().split('\n')[0]
        subparser = subparsers.add_parser(module.NAME, help=summary)
        module.config_argparser(subparser)
    return psr


def main(argv=None):
    """
    Parse the command line and run the subcommand
    """
    args = mk_argparser().parse_args(argv)
    try:
        args.func(args)
    except ConllxViewException as err:
        sys.exit("%s: %s" % (type(err).__name__, err))
