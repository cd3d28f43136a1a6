"""Configuration management for dadi.

Settings live in a KEY = value file (dadi.conf), not the older YAML
config.yml; existing config.yml files must be rewritten in this format:

    ROOT_PATH = ~/journal
    SECTIONS = [{"title": "Todo", "persist": true, "collate": false}]
    RESET_HOURS_AFTER_MIDNIGHT = 4
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILE = Path(
    os.environ.get("DADI_CONFIG", Path.home() / ".config" / "dadi" / "dadi.conf")
)


class ConfigError(Exception):
    """Configuration file is missing or malformed."""


@dataclass
class SectionConfig:
    """A section every new entry gets."""

    title: str
    persist: bool = False  # Carry the body over from the previous entry
    collate: bool = False  # Include in `dadi collate` reports


@dataclass
class Config:
    """dadi configuration."""

    root_path: Path
    sections: list[SectionConfig] = field(default_factory=list)
    reset_hours_after_midnight: int = 0


def _unquote(value: str) -> str:
    """Strip surrounding quotes, or an inline comment from unquoted values."""
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            return value[1:end_quote] if end_quote != -1 else value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def _flag(item: dict, key: str) -> bool:
    """A JSON true/false flag; anything else is an error."""
    value = item.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"Section {key!r} must be true or false, got {value!r}")
    return value


def parse_section_configs(value: str) -> list[SectionConfig]:
    """Parse the SECTIONS value: a JSON list of {"title", "persist", "collate"}."""
    try:
        data = json.loads(value)
        sections = [
            SectionConfig(
                title=item["title"],
                persist=_flag(item, "persist"),
                collate=_flag(item, "collate"),
            )
            for item in data
        ]
    except (json.JSONDecodeError, KeyError, TypeError, AttributeError) as e:
        raise ConfigError(f"Failed to parse SECTIONS: {e}")

    seen = set()
    for section in sections:
        if not isinstance(section.title, str) or not section.title:
            raise ConfigError("Section titles must be non-empty strings")
        # A title is written as a single heading line
        if "\n" in section.title or "\r" in section.title:
            raise ConfigError(f"Section title must not contain line breaks: {section.title!r}")
        if section.title in seen:
            raise ConfigError(f"Duplicate section title: {section.title}")
        seen.add(section.title)
    return sections


def load_config(path: Path | None = None) -> Config:
    """Load configuration from dadi.conf."""
    path = path or CONFIG_FILE
    if not path.exists():
        raise ConfigError(f"Config file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e

    root_path = None
    sections: list[SectionConfig] = []
    reset_hours = 0

    for line in text.splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        if "=" not in line:
            continue

        key, _, value = line.partition("=")
        key = key.strip().lower()

        # SECTIONS is raw JSON and may contain quotes or '#'
        value = value.strip() if key == "sections" else _unquote(value.strip())

        match key:
            case "root_path":
                root_path = Path(value).expanduser() if value else None
            case "sections":
                sections = parse_section_configs(value)
            case "reset_hours_after_midnight":
                try:
                    reset_hours = int(value)
                except ValueError:
                    raise ConfigError(f"RESET_HOURS_AFTER_MIDNIGHT must be an integer, got {value!r}")
                if reset_hours < 0:
                    raise ConfigError(f"RESET_HOURS_AFTER_MIDNIGHT must not be negative, got {reset_hours}")
            case _:
                logger.warning(f"Ignoring unknown config key: {key}")

    if not root_path:
        raise ConfigError(f"ROOT_PATH not set in {path}")

    return Config(
        root_path=root_path,
        sections=sections,
        reset_hours_after_midnight=reset_hours,
    )
