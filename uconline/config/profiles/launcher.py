from uconline.config import ini

from . import base


# Fallbacks for keys missing from a store are the generated document's values
DEFAULTS = ini.default_store()


class LauncherProfile(base.BaseProfile):
    """ Settings consumed by the game launcher

    An app_id of 0 means no application is configured, both when the key is
    missing and when it holds something that isn't a positive integer.
    """

    SECTION = 'uc-online'

    app_id = base.ProfileProperty('AppID', 0, base.to_uint, base.from_uint)
    game_executable = base.ProfileProperty(
        'GameExecutable', DEFAULTS.get_value(SECTION, 'GameExecutable'))
    game_arguments = base.ProfileProperty(
        'GameArguments', DEFAULTS.get_value(SECTION, 'GameArguments'))
    steam_app_id_file = base.ProfileProperty(
        'SteamAppIdFile', DEFAULTS.get_value(SECTION, 'SteamAppIdFile'))

    # Unlike the other settings, the dll path is written out as soon as it's set
    steam_api_dll_path = base.ProfileProperty(
        'SteamApiDllPath', DEFAULTS.get_value(SECTION, 'SteamApiDLLPath'), flush=True)

    def get_app_id(self):
        return self.app_id

    def set_app_id(self, app_id):
        self.app_id = app_id

    def get_game_executable(self):
        return self.game_executable

    def set_game_executable(self, path):
        self.game_executable = path

    def get_game_arguments(self):
        return self.game_arguments

    def set_game_arguments(self, arguments):
        self.game_arguments = arguments

    def get_steam_api_dll_path(self):
        return self.steam_api_dll_path

    def set_steam_api_dll_path(self, path):
        self.steam_api_dll_path = path


class LoggingProfile(base.BaseProfile):

    SECTION = 'Logging'

    enable_logging = base.ProfileProperty(
        'EnableLogging', DEFAULTS.get_value(SECTION, 'EnableLogging', typ=base.to_bool), base.to_bool)
    log_file = base.ProfileProperty('LogFile', DEFAULTS.get_value(SECTION, 'LogFile'))


base.RootProfile.register_section_profile(LauncherProfile.SECTION, LauncherProfile)
base.RootProfile.register_section_profile(LoggingProfile.SECTION, LoggingProfile)
