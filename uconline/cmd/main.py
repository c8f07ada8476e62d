# -*- coding: utf-8 -*-
import logging
import os.path

from uconline import config
from uconline.util import logsetup

from .commands import ALL_COMMANDS

logger = logging.getLogger(__name__)


def main(opts):
    level = logging.INFO
    if opts.verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level)

    store = config.get_default_store(opts.config)

    handler = logsetup.attach_log_file(
        config.get_logging_profile(store),
        base_dir=os.path.dirname(os.path.abspath(opts.config)))

    # Loading happens before the log file is attached, repeat what went wrong there
    if store.last_error:
        logger.error("While loading configuration: %s", store.last_error)

    try:
        return ALL_COMMANDS[opts.command].main(opts, store) or 0
    finally:
        logsetup.detach_log_file(handler)
