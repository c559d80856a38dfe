import copy
import logging
import os
import typing as t

import click
import yaml

from fluentdocker.utils.util import iter_leafs, join_strs, Singleton


class SettingsError(ValueError):
    """ Error raised if something with the settings goes wrong """
    pass


class Settings(metaclass=Singleton):
    """
    Manages the Settings.
    The settings keys and sub keys are combined by a slash, e.g. "build/docker".

    The current settings are:

    .. code: yaml

        log_level: info         # Logging level (debug, info, warn, error or quiet)
        dockerfile:
          header: true          # Prepend the "generated file" comment to rendered Dockerfiles
        build:
          docker: docker        # Build tool executable
          dockerfile: Dockerfile  # File the rendered Dockerfile is written to before building
    """

    config_file_name = "fluentdocker.yaml"  # type: str
    """ Default name of the configuration files """
    defaults = {
        "log_level": "info",
        "dockerfile": {
            "header": True
        },
        "build": {
            "docker": "docker",
            "dockerfile": "Dockerfile"
        }
    }  # type: t.Dict[str, t.Any]
    """ Default settings, the type of each leaf is the only allowed type for its setting """
    log_levels = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warn": logging.WARNING,
        "error": logging.ERROR,
        "quiet": logging.CRITICAL
    }  # type: t.Dict[str, int]

    def __init__(self):
        """
        Initializes a Settings singleton object with the default settings.
        Use :meth:`load_files` to additionally load the settings files.
        """
        self.prefs = copy.deepcopy(self.defaults)  # type: t.Dict[str, t.Any]
        """ The set configurations """
        self._setup()

    def load_files(self):
        """ Loads the configuration files from the current and the config directory """
        self.load_from_config_dir()
        self.load_from_current_dir()
        self._setup()

    def _setup(self):
        """
        Apply the settings that have global effects (currently only the log level).
        """
        logging.getLogger().setLevel(self.log_levels[self["log_level"]])

    def reset(self):
        """
        Resets the current settings to the defaults.
        """
        self.prefs = copy.deepcopy(self.defaults)
        self._setup()

    def _validate(self, path: t.List[str], value) -> t.Optional[str]:
        """
        Check whether the value can be stored under the passed key path.

        :param path: passed key path
        :param value: new value
        :return: None if valid, else the error message
        """
        key = "/".join(path)
        default = self.defaults
        for sub in path:
            if not isinstance(default, dict) or sub not in default:
                return "No such setting {}".format(key)
            default = default[sub]
        if isinstance(default, dict):
            return "Setting {} is a domain and can't be set directly".format(key)
        if type(value) is not type(default):
            return "Setting {} has to be of type {}, got {!r}".format(key, type(default).__name__, value)
        if path == ["log_level"] and value not in self.log_levels:
            return "Unknown log level {!r}, expected {}".format(value, join_strs(list(self.log_levels), "or"))
        return None

    def load_file(self, file: str):
        """
        Loads the configuration from the configuration YAML file.

        :param file: path to the file
        :raises: SettingsError if the settings file is incorrect or doesn't exist
        """
        tmp = copy.deepcopy(self.prefs)
        try:
            with open(file, "r", encoding="utf-8") as stream:
                map = yaml.safe_load(stream.read()) or {}
        except (yaml.YAMLError, IOError) as err:
            raise SettingsError(str(err))
        if not isinstance(map, dict):
            raise SettingsError("Settings file '{}' doesn't contain a mapping".format(file))
        try:
            self.load_from_dict(map)
        except SettingsError as err:
            self.prefs = tmp
            raise SettingsError("Settings file '{}': {}".format(file, err))

    def load_from_dict(self, config_dict: t.Dict[str, t.Any]):
        """
        Load the configuration from the passed dictionary.

        :param config_dict: passed configuration dictionary
        :raises: SettingsError if one of the settings isn't valid, no setting is changed in this case
        """
        tmp = copy.deepcopy(self.prefs)
        try:
            for path, value in iter_leafs(config_dict):
                self._set(path, value)
        except SettingsError:
            self.prefs = tmp
            raise
        self._setup()

    def load_from_config_dir(self):
        """
        Load the config file from the application directory (e.g. in the users home folder) if it exists.
        """
        conf = os.path.join(click.get_app_dir("fluentdocker"), "config.yaml")
        if os.path.exists(conf) and os.path.isfile(conf):
            self.load_file(conf)

    def load_from_current_dir(self):
        """
        Load the configuration from the configuration file in the current working directory if it exists.
        """
        if os.path.exists(self.config_file_name) and os.path.isfile(self.config_file_name):
            self.load_file(self.config_file_name)

    def get(self, key: str) -> t.Any:
        """
        Get the setting with the given key.

        :param key: name of the setting
        :return: value of the setting
        :raises: SettingsError if the setting doesn't exist
        """
        path = key.split("/")
        if not self.validate_key_path(path):
            raise SettingsError("No such setting {}".format(key))
        data = self.prefs
        for sub in path:
            data = data[sub]
        return data

    def __getitem__(self, key: str) -> t.Any:
        """
        Alias for self.get(self, key).
        """
        return self.get(key)

    def _set(self, path: t.List[str], value):
        """
        Set the setting at the passed path.

        :param path: passed key path
        :param value: new value
        :raises: SettingsError if the setting doesn't exist or the value has the wrong type
        """
        error = self._validate(path, value)
        if error:
            raise SettingsError(error)
        tmp_pref = self.prefs
        for key in path[0:-1]:
            tmp_pref = tmp_pref[key]
        tmp_pref[path[-1]] = value

    def set(self, key: str, value):
        """
        Sets the setting key to the passed new value

        :param key: settings key
        :param value: new value
        :raises: SettingsError if the setting isn't valid
        """
        self._set(key.split("/"), value)
        self._setup()

    def __setitem__(self, key: str, value):
        """
        Alias for self.set(key, value).
        """
        self.set(key, value)

    def validate_key_path(self, path: t.List[str]) -> bool:
        """
        Validates a path into in to the settings trees,
        :param path: list of sub keys
        :return: Is this key path valid?
        """
        tmp = self.prefs
        for item in path:
            if not isinstance(tmp, dict) or item not in tmp:
                return False
            tmp = tmp[item]
        return True

    def default(self, value: t.Optional[t.Any], key: str):
        """
        Returns the passed value if isn't None else the settings value under the passed key.

        :param value: passed value
        :param key: passed settings key
        """
        if value is None:
            return self[key]
        return value

    def store_into_file(self, file_name: str):
        """
        Stores the current settings into a yaml file.

        :param file_name: name of the resulting file
        """
        with open(file_name, "w", encoding="utf-8") as f:
            yaml.safe_dump(self.prefs, f, default_flow_style=False)

