# -*- coding: utf-8 -*-
from uconline import config


def add_opts(subp):
    subp.add_parser('launcher', help="Show the settings the launcher will use")


def main(opts, store):
    profile = config.get_launcher_profile(store)
    logging_profile = config.get_logging_profile(store)

    app_id = profile.app_id
    print("AppID:           %s" % (app_id if app_id else 'not configured',))
    print("Executable:      %s" % (profile.game_executable,))
    print("Arguments:       %s" % (profile.game_arguments,))
    print("steam_appid.txt: %s" % (profile.steam_app_id_file,))
    print("steam_api path:  %s" % (profile.steam_api_dll_path or '(next to the launcher)',))
    print("Logging:         %s" % (
        logging_profile.log_file if logging_profile.enable_logging else 'disabled',))
