# -*- coding: utf-8 -*-
import io
import os.path


class FileSystem(object):
    """ Whole-document file access used by file-backed configuration stores

    Implementations raise OSError (or UnicodeDecodeError on undecodable
    content) on failure. Callers decide how to recover.
    """

    def exists(self, path):
        raise NotImplementedError()

    def read_all_text(self, path):
        raise NotImplementedError()

    def write_all_text(self, path, text):
        raise NotImplementedError()


class LocalFileSystem(FileSystem):

    # utf-8-sig drops a leading BOM left behind by editors that add one
    read_encoding = 'utf-8-sig'
    write_encoding = 'utf-8'

    def exists(self, path):
        return os.path.isfile(path)

    def read_all_text(self, path):
        with io.open(path, 'r', encoding=self.read_encoding) as f:
            return f.read()

    def write_all_text(self, path, text):
        with io.open(path, 'w', encoding=self.write_encoding) as f:
            f.write(text)
