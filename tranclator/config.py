"""Configuration loader for Tranclator."""

import logging
import os
import yaml
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)

CONFIG_PATH = "tranclator.yaml"

# Config file key -> dataclass field
GLOBAL_KEYS = {
    "default-language": "default_language",
    "copy-to-clipboard": "copy_to_clipboard",
    "quit-keywords": "quit_keywords",
}
LANGUAGE_KEYS = {
    "name": "name",
    "lower-mode": "lower_mode",
    "dict": "dictionary",
}


class TranclatorError(Exception):
    """Expected failure reported to the user; the process still exits cleanly."""


class ConfigNotFoundError(TranclatorError):
    def __init__(self, path: str):
        super().__init__(f"Could not find `{path}`")
        self.path = path


class ConfigReadError(TranclatorError):
    def __init__(self):
        super().__init__("Could not read config file")


class ConfigParseError(TranclatorError):
    def __init__(self, detail: str = ""):
        super().__init__("Could not parse config file")
        self.detail = detail


class NoLanguageError(TranclatorError):
    def __init__(self):
        super().__init__("No language specified")


class LanguageNotFoundError(TranclatorError):
    def __init__(self, name: str):
        super().__init__(f"Language {name} not found")
        self.name = name


class CapitalizationMode(Enum):
    LOWER = "lower"
    PRESERVE = "preserve"
    UPPER = "upper"


@dataclass(frozen=True)
class Language:
    name: str
    lower_mode: CapitalizationMode
    dictionary: tuple[tuple[str, str], ...] = ()  # in application order

    def __post_init__(self):
        if isinstance(self.lower_mode, str):
            object.__setattr__(self, "lower_mode", CapitalizationMode(self.lower_mode))
        if isinstance(self.dictionary, dict):
            object.__setattr__(self, "dictionary", tuple(self.dictionary.items()))
        else:
            object.__setattr__(self, "dictionary", tuple(tuple(pair) for pair in self.dictionary))


@dataclass
class GlobalConfig:
    default_language: Optional[str] = None
    copy_to_clipboard: Optional[bool] = None  # parsed, not consulted
    quit_keywords: list = field(default_factory=list)

    def __post_init__(self):
        if self.quit_keywords is None:
            self.quit_keywords = []


@dataclass
class Config:
    global_: GlobalConfig = field(default_factory=GlobalConfig)
    languages: list = field(default_factory=list)

    def find_language(self, name: str) -> Language:
        """Return the language whose name is exactly `name`."""
        for language in self.languages:
            if language.name == name:
                return language
        raise LanguageNotFoundError(name)


class UniqueKeyLoader(yaml.SafeLoader):
    """SafeLoader that rejects a mapping repeating one of its keys."""

    def construct_mapping(self, node, deep=False):
        if isinstance(node, yaml.MappingNode):
            self.flatten_mapping(node)
            seen = set()
            for key_node, _ in node.value:
                key = self.construct_object(key_node, deep=deep)
                try:
                    duplicate = key in seen
                except TypeError:
                    continue  # unhashable, reported by SafeLoader below
                if duplicate:
                    raise yaml.constructor.ConstructorError(
                        "while constructing a mapping", node.start_mark,
                        f"found duplicate key {key!r}", key_node.start_mark,
                    )
                seen.add(key)
        return super().construct_mapping(node, deep=deep)


def _map_keys(section: dict, keys: dict, where: str) -> dict:
    """Map the config file's keys onto dataclass field names.

    Keys not listed in `keys` are rejected, including the field names
    themselves.
    """
    if not isinstance(section, dict):
        raise ConfigParseError(f"{where}: expected a mapping, got {type(section).__name__}")
    out = {}
    for key, value in section.items():
        if key not in keys:
            raise ConfigParseError(f"{where}: unknown key {key!r}")
        out[keys[key]] = value
    return out


def _check_type(value, expected, where: str):
    if value is not None and not isinstance(value, expected):
        raise ConfigParseError(f"{where}: expected {expected.__name__}, got {type(value).__name__}")


def _parse_global(data) -> GlobalConfig:
    values = _map_keys(data, GLOBAL_KEYS, "global")
    _check_type(values.get("default_language"), str, "global.default-language")
    _check_type(values.get("copy_to_clipboard"), bool, "global.copy-to-clipboard")
    keywords = values.get("quit_keywords")
    _check_type(keywords, list, "global.quit-keywords")
    for keyword in keywords or []:
        _check_type(keyword, str, "global.quit-keywords")
    return GlobalConfig(**values)


def _parse_language(data, index: int) -> Language:
    where = f"language[{index}]"
    values = _map_keys(data, LANGUAGE_KEYS, where)
    for required, key in (("name", "name"), ("lower_mode", "lower-mode"), ("dictionary", "dict")):
        if values.get(required) is None:
            raise ConfigParseError(f"{where}: missing {key!r}")
    _check_type(values["name"], str, f"{where}.name")
    _check_type(values["dictionary"], dict, f"{where}.dict")
    for word, translation in values["dictionary"].items():
        if not isinstance(word, str) or not isinstance(translation, str):
            raise ConfigParseError(f"{where}.dict: entries must be strings, got {word!r}: {translation!r}")
    try:
        values["lower_mode"] = CapitalizationMode(values["lower_mode"])
    except ValueError:
        raise ConfigParseError(f"{where}.lower-mode: unknown mode {values['lower_mode']!r}") from None
    return Language(**values)


def parse_config(data: dict) -> Config:
    """Build a Config from a loaded YAML document."""
    if not isinstance(data, dict):
        raise ConfigParseError(f"expected a mapping at top level, got {type(data).__name__}")

    unknown = set(data) - {"global", "language"}
    if unknown:
        raise ConfigParseError(f"unknown top-level keys: {sorted(map(str, unknown))}")

    global_data = data.get("global")
    global_ = _parse_global(global_data) if global_data is not None else GlobalConfig()

    language_data = data.get("language")
    if language_data is None:
        language_data = []
    _check_type(language_data, list, "language")
    languages = [_parse_language(item, i) for i, item in enumerate(language_data)]

    return Config(global_=global_, languages=languages)


def load_config(path: Optional[str] = None) -> Config:
    """Load configuration from a YAML file.

    Raises:
        ConfigNotFoundError: the file does not exist
        ConfigReadError: the file exists but cannot be read
        ConfigParseError: the file is not valid YAML or does not match the schema
    """
    path = path or CONFIG_PATH
    if not os.path.exists(path):
        raise ConfigNotFoundError(path)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            raw = f.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Reading %s failed: %s", path, e)
        raise ConfigReadError() from e

    try:
        data = yaml.load(raw, Loader=UniqueKeyLoader)
    except yaml.YAMLError as e:
        logger.debug("YAML error in %s: %s", path, e)
        raise ConfigParseError(str(e)) from e

    if data is None:
        data = {}

    try:
        config = parse_config(data)
    except ConfigParseError as e:
        logger.debug("Invalid config %s: %s", path, e.detail)
        raise

    logger.debug("Loaded %d language(s) from %s", len(config.languages), path)
    return config


def resolve_language(config: Config, requested: Optional[str] = None) -> Language:
    """Pick the language to translate with.

    A name given on the command line wins over `global.default-language`.
    """
    name = requested if requested is not None else config.global_.default_language
    if name is None:
        raise NoLanguageError()
    return config.find_language(name)
