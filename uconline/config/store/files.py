import logging

from uconline.config import ini
from uconline.util.fs import LocalFileSystem

from .base import ConfigStore


logger = logging.getLogger(__name__)


class IniFileStore(ConfigStore):
    """ Store backed by a single INI document

    The whole document is read on :meth:`load` and rewritten on :meth:`save`.
    A missing document is created from the default template. I/O problems are
    logged, kept in last_error and reported through the boolean result of load
    and save, never raised.
    """

    DEFAULT_PATH = 'config.ini'

    def __init__(self, path=None, fs=None, autoload=True):
        super(IniFileStore, self).__init__()
        self.path = path or self.DEFAULT_PATH
        self.fs = fs if fs is not None else LocalFileSystem()
        self.last_error = None
        if autoload:
            self.load()

    def load(self):
        """ Replace the store's contents with the document at path

        Returns True when the store holds either the document's or the default
        template's contents, False when nothing could be loaded.
        """
        self.clear()
        self.last_error = None

        if not self.fs.exists(self.path):
            logger.info("No configuration at %s, creating defaults", self.path)
            return self.create_default()

        try:
            text = self.fs.read_all_text(self.path)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Error loading config from %s: %s", self.path, e)
            self.last_error = "error loading %s: %s" % (self.path, e)
            return self.create_default()

        ini.parse(text, self)
        logger.debug("Loaded %d sections from %s", len(self.sections), self.path)
        return True

    def create_default(self):
        """ Write the default template to path and load it

        If the template can't be written the store is left empty.
        """
        text = ini.default_document()
        try:
            self.fs.write_all_text(self.path, text)
        except OSError as e:
            logger.error("Error creating default config at %s: %s", self.path, e)
            self.last_error = "error creating default config at %s: %s" % (self.path, e)
            return False

        self.clear()
        ini.parse(text, self)
        return True

    def save(self):
        """ Rewrite the document at path from the store's contents

        Comments in the original document are not preserved. On failure the
        in-memory contents are kept as they are.
        """
        try:
            self.fs.write_all_text(self.path, ini.serialize(self))
        except OSError as e:
            logger.error("Error saving config to %s: %s", self.path, e)
            self.last_error = "error saving %s: %s" % (self.path, e)
            return False
        return True
