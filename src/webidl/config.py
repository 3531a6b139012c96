"""
    Copyright 2026 Inmanta

    Licensed under the Apache License, Version 2.0 (the "License");
    you may not use this file except in compliance with the License.
    You may obtain a copy of the License at

        http://www.apache.org/licenses/LICENSE-2.0

    Unless required by applicable law or agreed to in writing, software
    distributed under the License is distributed on an "AS IS" BASIS,
    WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
    See the License for the specific language governing permissions and
    limitations under the License.

    Contact: code@inmanta.com
"""

import logging
import os
from configparser import ConfigParser, Interpolation
from typing import Callable, Generic, List, Optional, TypeVar, Union

LOGGER = logging.getLogger(__name__)

MAIN_CONFIG_FILE = "/etc/webidl/webidl.cfg"


def _normalize_name(name: str) -> str:
    return name.replace("_", "-")


def _get_from_env(section: str, name: str) -> Optional[str]:
    """Options can be overridden with WEBIDL_<SECTION>_<NAME>, e.g. WEBIDL_PARSER_DEFAULT_FILE"""
    return os.environ.get(f"WEBIDL_{section}_{name}".replace("-", "_").upper(), default=None)


class LenientConfigParser(ConfigParser):
    """Accepts both default_file and default-file as option name"""

    def optionxform(self, name: str) -> str:
        return super().optionxform(_normalize_name(name))


class Config(object):
    __instance: Optional[ConfigParser] = None

    @classmethod
    def load_config(cls, config_file: Optional[str] = None, main_cfg_file: str = MAIN_CONFIG_FILE) -> None:
        """
        Read the system wide, the user and the working directory config file, followed by config_file when it is given.
        Options in a later file override those in an earlier one. Missing files are skipped.
        """
        files: List[str] = [main_cfg_file, os.path.expanduser("~/.webidl.cfg"), ".webidl.cfg"]
        if config_file is not None:
            files.append(config_file)

        config = LenientConfigParser(interpolation=Interpolation())
        LOGGER.debug("Loaded config files %s", config.read(files))
        cls.__instance = config

    @classmethod
    def _get_instance(cls) -> ConfigParser:
        if cls.__instance is None:
            cls.load_config()
        assert cls.__instance is not None
        return cls.__instance

    @classmethod
    def _reset(cls) -> None:
        cls.__instance = None

    @classmethod
    def set(cls, section: str, name: str, value: str) -> None:
        """
        Override a value
        """
        config = cls._get_instance()
        if not config.has_section(section):
            config.add_section(section)
        config.set(section, _normalize_name(name), value)


def is_bool(value: Union[bool, str]) -> bool:
    """Boolean value, represented as any of true, false, on, off, yes, no, 1, 0. (Case-insensitive)"""
    if isinstance(value, bool):
        return value
    state = ConfigParser.BOOLEAN_STATES.get(value.lower())
    if state is None:
        raise ValueError("Not a boolean: %s" % value)
    return state


def is_str(value: str) -> str:
    """str"""
    return str(value)


T = TypeVar("T")


class Option(Generic[T]):
    """
    A config option, defined at module level.

    The value is looked up in the environment first, then in the config files. The default is used when neither sets it.

    :param section: section in the config file
    :param name: name of the option
    :param default: the default value, or a function returning it
    :param documentation: the documentation for this option
    :param validator: turns the string representation of the option into the correct type
    """

    def __init__(
        self,
        section: str,
        name: str,
        default: Union[T, Callable[[], T]],
        documentation: str,
        validator: Callable[[str], T] = is_str,
    ) -> None:
        self.section = section
        self.name = _normalize_name(name)
        self.default = default
        self.documentation = documentation
        self.validator = validator

    def get(self) -> T:
        value = _get_from_env(self.section, self.name)
        if value is not None:
            LOGGER.debug("Option %s.%s was set using an environment variable", self.section, self.name)
        else:
            value = Config._get_instance().get(self.section, self.name, fallback=self.get_default_value())
        return self.validate(value)

    def validate(self, value: str) -> T:
        return self.validator(value)

    def get_default_value(self) -> T:
        if callable(self.default):
            return self.default()
        return self.default

    def set(self, value: str) -> None:
        """Only for tests"""
        Config.set(self.section, self.name, value)
