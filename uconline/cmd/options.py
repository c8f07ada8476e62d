# -*- coding: utf-8 -*-
import argparse

from uconline._version import __version__

from .commands import ALL_COMMANDS


def build_parser():
    ap = argparse.ArgumentParser(
        prog='uconline',
        description='Inspect and edit the uc-online launcher configuration',
    )
    ap.add_argument('--verbose', '-v', help='Log more verbosely', action='store_true', default=False)
    ap.add_argument('--config', '-c', default='config.ini', metavar='PATH',
        help='Configuration file to use. It is created with default contents if missing.')
    ap.add_argument('--version', action='version', version='%(prog)s ' + __version__)

    subp = ap.add_subparsers(dest='command')
    subp.required = True

    for subcommand in ALL_COMMANDS.values():
        subcommand.add_opts(subp)

    return ap


def parse(args=None):
    return build_parser().parse_args(args)
