"""
`month` package settings.

The settings are the composition of a set of default settings
(hard-coded in this module), settings (optionally) specified in the
YAML file named by the `MONTH_SETTINGS_FILE` environment variable, and
individual overrides from environment variables:

    MONTH_TIME_ZONE
        name of the time zone in which the current month is resolved
        when no time zone is specified, for example "America/New_York".
"""


import logging

from environs import Env

from month.util.settings import Settings


_logger = logging.getLogger(__name__)


_DEFAULT_SETTINGS = Settings.create_from_yaml('''
time_zone: UTC
''')

_SETTINGS_FILE_ENV_VAR = 'MONTH_SETTINGS_FILE'
_TIME_ZONE_ENV_VAR = 'MONTH_TIME_ZONE'


_settings = None


def get_settings():
    global _settings
    if _settings is None:
        _settings = _create_settings()
    return _settings


def reload_settings():
    global _settings
    _settings = _create_settings()
    return _settings


def _create_settings():

    env = Env()

    settings = _DEFAULT_SETTINGS

    file_path = env.str(_SETTINGS_FILE_ENV_VAR, None)
    if file_path:
        _logger.debug(f'Loading month settings from file "{file_path}".')
        try:
            file_settings = Settings.create_from_yaml_file(file_path)
        except Exception as e:
            raise ValueError(
                f'Load failed for settings file "{file_path}". Error '
                f'message was: {e}')
        settings = Settings(settings, file_settings)

    time_zone = env.str(_TIME_ZONE_ENV_VAR, None)
    if time_zone:
        settings = Settings(settings, time_zone=time_zone)

    _logger.debug(f'Month settings: {settings!r}')

    return settings
