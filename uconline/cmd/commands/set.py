# -*- coding: utf-8 -*-
import logging

logger = logging.getLogger(__name__)


def add_opts(subp):
    ap = subp.add_parser('set', help="Set a value and save the configuration")
    ap.add_argument('section', help='Section name, created if missing')
    ap.add_argument('key', help='Key name')
    ap.add_argument('value', nargs='?', default='', help='New value, empty if omitted')


def main(opts, store):
    store.set_value(opts.section, opts.key, opts.value)
    if not store.save():
        return 1
    logger.info("Set [%s] %s = %s", opts.section, opts.key, opts.value)
