# -*- coding: utf-8 -*-
import logging

logger = logging.getLogger(__name__)


def add_opts(subp):
    ap = subp.add_parser('unset', help="Remove a value and save the configuration")
    ap.add_argument('section', help='Section name')
    ap.add_argument('key', help='Key name')


def main(opts, store):
    if not store.del_value(opts.section, opts.key):
        logger.warning("No value for [%s] %s in %s", opts.section, opts.key, store.path)
        return 0
    if not store.save():
        return 1
