# -*- coding: utf-8 -*-
""" INI document codec

Documents are made of ``[section]`` headers followed by ``key = value`` lines.
Lines starting with ``;`` or ``#`` are comments. There is no quoting, escaping
or line continuation: keys and values are whatever surrounds the first ``=``,
stripped of leading and trailing whitespace.
"""
import logging
import re

from uconline.config.store.base import ConfigStore


logger = logging.getLogger(__name__)

COMMENT_PREFIXES = (';', '#')

# Only CR, LF and CRLF end a line, other unicode line breaks belong to the value
LINE_BREAK = re.compile(r'\r\n|\r|\n')


def parse(text, store=None):
    """ Parse document text into a store

    Entries are added to store, creating a new :class:`ConfigStore` when none
    is given, and the store is returned. Malformed lines are skipped: key lines
    before the first section header, lines without an ``=`` and lines starting
    with ``=``. A key repeated within a section, even one reopened further down
    the document, keeps the last value seen.
    """
    if store is None:
        store = ConfigStore()

    if text.startswith('\ufeff'):
        text = text[1:]

    section = ''
    for lineno, line in enumerate(LINE_BREAK.split(text), 1):
        line = line.strip()

        if not line or line.startswith(COMMENT_PREFIXES):
            continue

        if line.startswith('[') and line.endswith(']'):
            section = line[1:-1]
            store.add_section(section)
            continue

        if not section:
            logger.debug("Skipping line %d outside any section: %r", lineno, line)
            continue

        pos = line.find('=')
        if pos > 0:
            store.set_value(section, line[:pos].strip(), line[pos+1:].strip())
        else:
            logger.debug("Skipping malformed line %d: %r", lineno, line)

    return store


def iter_lines(store):
    for section in store.list_sections():
        yield '[%s]' % (section,)
        for key, value in store.sections[section].items():
            yield '%s = %s' % (key, value)
        yield ''


def serialize(store):
    """ Render a store as document text

    Sections and keys come out in store order. Comments aren't kept by the store,
    so a document that is parsed and serialized back loses them.
    """
    return ''.join(line + '\n' for line in iter_lines(store))


DEFAULT_DOCUMENT = (
    "[uc-online]",
    "; Set the appID to be used here, e.g., 730 for Counter-Strike 2)",
    "; (Please note that you will want to set it to a game you can get for free that is multiplayer. "
        "Anything else, and it won't work.)",
    "; Default appID is set to 480 (Spacewar), however you can change it to any appID you want.",
    "AppID = 480",
    "",
    "; Executable needs to be set directly. Unlike the dll, there is no 'default' for the exe.",
    "; Using UE5 games as an example, the correct launcher path will look like this:",
    "; .\\game folder\\game folder\\Binaries\\Win64\\game folder-Win64-Shipping.exe",
    "GameExecutable = ",
    "",
    "; Set launch arguments where necessary - e.g., for Source Engine games like Half-Life: Source, "
        "set it to '-game hl1 -windowed' to launch it correctly.",
    "GameArguments = ",
    "",
    "; Set the path to the steam_appid.txt file to use. "
        "(If one does not exist, it will be generated with the appID set at the top.)",
    "SteamAppIdFile = steam_appid.txt",
    "",
    "; Path to steam_api.dll (leave empty to use default location - in the same folder next to the launcher.)",
    "; Only set the path as the folder containing the dll relative to the launcher.",
    "; Again, using UE5 games as an example:",
    "; .\\game folder\\Engine\\Binaries\\ThirdParty\\Steamworks\\Steamv153\\Win64",
    "SteamApiDLLPath = ",
    "",
    "[Logging]",
    "; Turns on logging. Not much gets logged, so it's not exactly useful. "
        "It does help with figuring out if you don't have .NET Runtime installed though.",
    "EnableLogging = true",
    "LogFile = uc-online.log",
)


def default_document():
    """ The commented document written when no configuration file exists yet """
    return ''.join(line + '\n' for line in DEFAULT_DOCUMENT)


def default_store():
    return parse(default_document())
