"""Module containing class `Settings`."""


from pathlib import Path

from ruamel.yaml import YAML


class Settings:

    """
    Collection of configuration settings.

    A *setting* has a *name* and a *value*. The name must be a Python
    identifier. A setting contained in a `Settings` object is accessed
    as an attribute of the object. Nested mappings become nested
    `Settings` objects.

    A `Settings` object can be initialized from other `Settings`
    objects and keyword arguments. Later sources override earlier ones,
    so `Settings(defaults, overrides)` yields the defaults updated
    with the overrides.
    """


    @staticmethod
    def create_from_dict(d):

        """Creates a settings object from a dictionary."""

        if not isinstance(d, dict):
            raise TypeError(
                f'Settings data must be a dictionary, not a '
                f'{d.__class__.__name__}.')

        return Settings(**{
            str(k): Settings._create_from_dict_aux(v)
            for k, v in d.items()})


    @staticmethod
    def _create_from_dict_aux(v):
        if isinstance(v, dict):
            return Settings.create_from_dict(v)
        elif isinstance(v, list):
            return [Settings._create_from_dict_aux(i) for i in v]
        else:
            return v


    @staticmethod
    def create_from_yaml(s):

        """Creates a settings object from a YAML string."""

        try:
            # We use the default round-trip loader, which is safe, and
            # the pure-Python implementation, which is less quirky than
            # the C one.
            d = YAML(pure=True).load(s)

        except Exception as e:
            raise ValueError(
                f'YAML parse failed. Error message was:\n{e}')

        if d is None:
            d = {}

        elif not isinstance(d, dict):
            raise ValueError('Settings must be a YAML mapping.')

        return Settings.create_from_dict(dict(d))


    @staticmethod
    def create_from_yaml_file(file_path):

        """Creates a settings object from a YAML file."""

        s = Path(file_path).read_text()
        return Settings.create_from_yaml(s)


    def __init__(self, *args, **kwargs):

        for arg in args:
            self.__dict__.update(arg.__dict__)

        self.__dict__.update(kwargs)


    def __eq__(self, other):
        if not isinstance(other, Settings):
            return False
        else:
            return self.__dict__ == other.__dict__


    def __contains__(self, name):
        return name in self.__dict__


    def __repr__(self):
        items = ', '.join(f'{k}={v!r}' for k, v in self.__dict__.items())
        return f'Settings({items})'


    def get(self, name, default=None):
        return self.__dict__.get(name, default)
