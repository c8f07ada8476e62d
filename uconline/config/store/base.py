import logging

from uconline.util.cidict import CaseInsensitiveDict


logger = logging.getLogger(__name__)


def format_value(value):
    """ Render a value the way it is stored: always a string """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    elif value is None:
        return ''
    return str(value)


class ConfigStore(object):
    """ In-memory sectioned key/value store

    Section and key names are case-insensitive, values are plain strings.
    Both sections and keys keep insertion order and the casing they were
    first inserted with, which is what gets written back out.

    Persistence is left to subclasses through :meth:`load` and :meth:`save`.
    """

    def __init__(self):
        self._sections = CaseInsensitiveDict()

    @property
    def sections(self):
        return self._sections

    def list_sections(self):
        return list(self._sections)

    def has_section(self, section):
        return section in self._sections

    def add_section(self, section):
        values = self._sections.get(section)
        if values is None:
            values = self._sections[section] = CaseInsensitiveDict()
        return values

    def get_section(self, name):
        return SectionView(self, name)

    def del_section(self, section):
        return self._sections.pop(section, None) is not None

    def list_keys(self, section):
        values = self._sections.get(section)
        if values is None:
            return []
        return list(values)

    def has_value(self, section, key):
        values = self._sections.get(section)
        return values is not None and key in values

    def get_value(self, section, key, deflt='', typ=None):
        values = self._sections.get(section)
        if values is None or key not in values:
            return deflt
        v = values[key]
        if typ is not None:
            v = typ(v)
        return v

    def set_value(self, section, key, value):
        self.add_section(section)[key] = format_value(value)

    def del_value(self, section, key):
        values = self._sections.get(section)
        if values is None:
            return False
        return values.pop(key, None) is not None

    def items(self):
        """ Iterate over (section, key, value) triples in document order """
        for section, values in self._sections.items():
            for key, value in values.items():
                yield section, key, value

    def clear(self):
        self._sections.clear()

    def copy(self):
        rv = ConfigStore()
        for section, values in self._sections.items():
            rv._sections[section] = values.copy()
        return rv

    def __eq__(self, other):
        if not isinstance(other, ConfigStore):
            return NotImplemented
        return self._sections == other._sections

    def load(self):
        raise NotImplementedError()

    def save(self):
        raise NotImplementedError()

    def flush(self):
        return self.save()


class SectionView(object):
    """ A single section of a store, addressed by name

    The view holds no data of its own, so it stays valid across reloads of
    the underlying store, and reading through it never creates the section.
    """

    def __init__(self, store, name):
        self.store = store
        self.name = name

    def list_keys(self):
        return self.store.list_keys(self.name)

    def get_value(self, key, deflt='', typ=None):
        return self.store.get_value(self.name, key, deflt, typ)

    def set_value(self, key, value):
        self.store.set_value(self.name, key, value)

    def del_value(self, key):
        return self.store.del_value(self.name, key)

    def flush(self):
        return self.store.flush()
