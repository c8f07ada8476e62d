# -*- coding: utf-8 -*-
import logging
import os.path


logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s %(levelname)s %(name)s: %(message)s'


def resolve_log_path(log_file, base_dir=None):
    log_file = os.path.expanduser(log_file)
    if base_dir and not os.path.isabs(log_file):
        log_file = os.path.join(base_dir, log_file)
    return log_file


def attach_log_file(logging_profile, base_dir=None, level=None, target=None):
    """ Mirror log output into the file named by the [Logging] section

    Nothing is attached when logging is disabled or no log file is set. Relative
    log file paths are resolved against base_dir, usually the folder holding the
    configuration file.

    Returns the attached handler, or None. A log file that can't be opened is
    reported and otherwise ignored.
    """
    if not logging_profile.enable_logging:
        return None

    log_file = logging_profile.log_file
    if not log_file:
        logger.warning("Logging is enabled but no log file is configured")
        return None

    if target is None:
        target = logging.getLogger()

    path = resolve_log_path(log_file, base_dir)
    try:
        handler = logging.FileHandler(path, encoding='utf-8')
    except OSError as e:
        logger.error("Cannot open log file %s: %s", path, e)
        return None

    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    if level is not None:
        handler.setLevel(level)
    target.addHandler(handler)
    logger.debug("Logging to %s", path)
    return handler


def detach_log_file(handler, target=None):
    if handler is None:
        return
    if target is None:
        target = logging.getLogger()
    target.removeHandler(handler)
    handler.close()
