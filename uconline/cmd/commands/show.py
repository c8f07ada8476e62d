# -*- coding: utf-8 -*-
import sys

from uconline.config import ini


def add_opts(subp):
    subp.add_parser('show', help="Print the configuration as it would be saved")


def main(opts, store):
    sys.stdout.write(ini.serialize(store))
