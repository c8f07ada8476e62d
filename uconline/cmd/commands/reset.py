# -*- coding: utf-8 -*-
import logging

logger = logging.getLogger(__name__)


def add_opts(subp):
    subp.add_parser('reset', help="Overwrite the configuration with the commented defaults")


def main(opts, store):
    if not store.create_default():
        return 1
    logger.info("Wrote default configuration to %s", store.path)
