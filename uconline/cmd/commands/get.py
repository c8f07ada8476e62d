# -*- coding: utf-8 -*-
import logging

logger = logging.getLogger(__name__)


def add_opts(subp):
    ap = subp.add_parser('get', help="Print a single value")
    ap.add_argument('section', help='Section name, case-insensitive')
    ap.add_argument('key', help='Key name, case-insensitive')
    ap.add_argument('--default', '-d', default=None,
        help='Value to print when the key is missing. Without it, a missing key is an error.')


def main(opts, store):
    value = store.get_value(opts.section, opts.key, opts.default)
    if value is None:
        logger.error("No value for [%s] %s in %s", opts.section, opts.key, store.path)
        return 1
    print(value)
