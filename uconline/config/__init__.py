import os

from .store import files
from .profiles import base, launcher


def get_default_store(path=None, fs=None):
    return files.IniFileStore(path, fs)


def get_root_profile(store=None):
    if store is None:
        store = get_default_store()
    return base.RootProfile(store)


def get_launcher_profile(store=None):
    return get_root_profile(store).get_section_profile(launcher.LauncherProfile.SECTION)


def get_logging_profile(store=None):
    return get_root_profile(store).get_section_profile(launcher.LoggingProfile.SECTION)


def store_from(path_or_store=None, **kw):
    """ Construct a store

    Returns a store based on a caller-supplied value. The behavior will
    be polymorphic on the kind of value provided.

    If None, the store for the default config.ini path is returned.

    If a string, the store for that path is loaded.

    If a store instance, it is just returned as is.
    """
    if path_or_store is None:
        return get_default_store(**kw)
    elif isinstance(path_or_store, (str, os.PathLike)):
        return get_default_store(path_or_store, **kw)
    elif isinstance(path_or_store, files.ConfigStore):
        return path_or_store
    else:
        raise ValueError(
            "store_from can take a path or store instance, not %r" % (type(path_or_store).__name__,)
        )
