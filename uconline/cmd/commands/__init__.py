# -*- coding: utf-8 -*-
from . import show, get, set, unset, reset, launcher

ALL_COMMANDS = {
    'show': show,
    'get': get,
    'set': set,
    'unset': unset,
    'reset': reset,
    'launcher': launcher,
}
