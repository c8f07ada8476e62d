import logging


logger = logging.getLogger(__name__)

UINT32_MAX = 2**32 - 1

TRUE_VALUES = ('true', 'yes', 'on', '1')
FALSE_VALUES = ('false', 'no', 'off', '0')


def to_uint(value):
    """ Parse an unsigned 32-bit decimal integer, raising ValueError otherwise """
    s = value.strip()
    if s.startswith('+'):
        s = s[1:]
    if not s or not s.isascii() or not s.isdigit():
        raise ValueError("not an unsigned integer: %r" % (value,))
    rv = int(s)
    if rv > UINT32_MAX:
        raise ValueError("out of range: %r" % (value,))
    return rv


def from_uint(value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError("expected an integer, not %r" % (type(value).__name__,))
    if not 0 <= value <= UINT32_MAX:
        raise ValueError("out of range: %r" % (value,))
    return str(value)


def to_bool(value):
    s = value.strip().lower()
    if s in TRUE_VALUES:
        return True
    elif s in FALSE_VALUES:
        return False
    raise ValueError("not a boolean: %r" % (value,))


class BaseProfile(object):
    """ Typed view over a single section of a configuration store """

    def __init__(self, section, name=None):
        self.section = section
        self.name = name if name is not None else section.name

    @property
    def store(self):
        return self.section.store

    def get_value(self, name, deflt='', typ=None):
        return self.section.get_value(name, deflt, typ)

    def set_value(self, name, value):
        self.section.set_value(name, value)

    def del_value(self, name):
        return self.section.del_value(name)

    def flush(self):
        return self.section.flush()


class RootProfile(object):

    section_profile_map = {}

    def __init__(self, store):
        self.store = store

    def get_section_profile(self, section, klass=None):
        if klass is None:
            klass = self.section_profile_map[section]
        return klass(self.store.get_section(section))

    @classmethod
    def register_section_profile(cls, section, klass):
        cls.section_profile_map[section] = klass


class ProfileProperty(object):
    """ Typed accessor for one key of a profile's section

    Reads coerce the stored string through typ. Values typ rejects with a
    ValueError read as deflt. Writes go through fmt when given, and flush the
    store right away when flush is set.
    """

    def __init__(self, name, deflt='', typ=None, fmt=None, flush=False):
        self.name = name
        self.deflt = deflt
        self.typ = typ
        self.fmt = fmt
        self.flush = flush

    def __get__(self, obj, typ=None):
        if obj is None:
            return self

        try:
            return obj.get_value(self.name, self.deflt, self.typ)
        except ValueError as e:
            logger.debug("Ignoring bad value for %s/%s: %s", obj.name, self.name, e)
            return self.deflt

    def __set__(self, obj, value):
        if self.fmt is not None:
            value = self.fmt(value)
        obj.set_value(self.name, value)
        if self.flush:
            obj.flush()

    def __delete__(self, obj):
        obj.del_value(self.name)
