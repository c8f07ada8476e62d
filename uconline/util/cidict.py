# -*- coding: utf-8 -*-
from collections.abc import Mapping, MutableMapping


def fold(key):
    """ Canonical form used to compare section and key names """
    if not isinstance(key, str):
        raise TypeError("keys must be strings, not %r" % (type(key).__name__,))
    return key.lower()


class CaseInsensitiveDict(MutableMapping):
    """ Ordered mapping with case-insensitive string keys

    Lookups, overwrites and deletions ignore the casing of the key, while
    iteration yields keys with the casing they had when first inserted.
    Overwriting an existing entry through a differently-cased key keeps both
    the original casing and the original position.

    Equality with another mapping compares the displayed keys, so two
    dictionaries holding the same values under differently-cased keys are
    not equal. Use :meth:`lower_items` for a casing-blind comparison.
    """

    def __init__(self, data=None, **kw):
        self._entries = {}
        if data is not None:
            self.update(data)
        if kw:
            self.update(kw)

    def __setitem__(self, key, value):
        folded = fold(key)
        entry = self._entries.get(folded)
        if entry is not None:
            key = entry[0]
        self._entries[folded] = (key, value)

    def __getitem__(self, key):
        return self._entries[fold(key)][1]

    def __delitem__(self, key):
        del self._entries[fold(key)]

    def __contains__(self, key):
        return isinstance(key, str) and key.lower() in self._entries

    def __iter__(self):
        return (key for key, _ in self._entries.values())

    def __len__(self):
        return len(self._entries)

    def display_key(self, key):
        return self._entries[fold(key)][0]

    def lower_items(self):
        return ((folded, entry[1]) for folded, entry in self._entries.items())

    def copy(self):
        return CaseInsensitiveDict(self.items())

    def __eq__(self, other):
        if not isinstance(other, Mapping):
            return NotImplemented
        return dict(self.items()) == dict(other.items())

    def __repr__(self):
        return '%s(%r)' % (type(self).__name__, dict(self.items()))
