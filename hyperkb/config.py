"""
Settings for hyperkb.

Settings are plain dataclasses, so they can be built in code. load_settings()
reads the same fields from a TOML or YAML file:

    log_level = "INFO"

    [space]
    audit = true

    [matcher]
    max_depth = 256
    max_steps = 1000000
    strict_literals = false

    [[types]]
    name = "MemberLink"
    parent = "Link"
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union
import logging
import tomllib

import yaml

from .core import AtomSpace, TypeRegistry, TYPES, ValidationError
from .matcher import DEFAULT_MAX_DEPTH, DEFAULT_MAX_STEPS, PatternMatcher


_log = logging.getLogger(__name__)


class ConfigError(ValidationError):
    """Raised when a settings file or mapping is malformed."""
    pass


@dataclass
class SpaceSettings:
    audit: bool = True


@dataclass
class MatcherSettings:
    max_depth: int = DEFAULT_MAX_DEPTH
    max_steps: int = DEFAULT_MAX_STEPS
    strict_literals: bool = False


@dataclass
class TypeSpec:
    """A type to register at startup."""
    name: str
    parent: str


def _section(data: Dict[str, Any], key: str, allowed: Dict[str, type]) -> Dict[str, Any]:
    section = data.get(key, {})
    if not isinstance(section, dict):
        raise ConfigError(f"[{key}] must be a table")
    unknown = set(section) - set(allowed)
    if unknown:
        raise ConfigError(f"Unknown keys in [{key}]: {sorted(unknown)}")
    for name, expected in allowed.items():
        if name not in section:
            continue
        value = section[name]
        # bool is an int subclass; keep them apart
        if expected is int and (isinstance(value, bool) or not isinstance(value, int)):
            raise ConfigError(f"{key}.{name} must be an integer, got {value!r}")
        if expected is bool and not isinstance(value, bool):
            raise ConfigError(f"{key}.{name} must be true or false, got {value!r}")
    return section


@dataclass
class Settings:
    space: SpaceSettings = field(default_factory=SpaceSettings)
    matcher: MatcherSettings = field(default_factory=MatcherSettings)
    types: List[TypeSpec] = field(default_factory=list)
    log_level: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "Settings":
        """Build settings from a parsed TOML/YAML document."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Settings must be a mapping, got {type(data).__name__}")
        unknown = set(data) - {"space", "matcher", "types", "log_level"}
        if unknown:
            raise ConfigError(f"Unknown settings: {sorted(unknown)}")

        space = _section(data, "space", {"audit": bool})
        matcher = _section(data, "matcher", {
            "max_depth": int,
            "max_steps": int,
            "strict_literals": bool,
        })
        for name in ("max_depth", "max_steps"):
            if name in matcher and matcher[name] < 1:
                raise ConfigError(f"matcher.{name} must be positive")

        raw_types = data.get("types", [])
        if not isinstance(raw_types, list):
            raise ConfigError("types must be a list of {name, parent} entries")
        types = []
        for entry in raw_types:
            if not isinstance(entry, dict) or set(entry) != {"name", "parent"}:
                raise ConfigError(f"Bad type entry: {entry!r}")
            types.append(TypeSpec(str(entry["name"]), str(entry["parent"])))

        log_level = data.get("log_level")
        if log_level is not None:
            log_level = str(log_level).upper()
            if not isinstance(logging.getLevelName(log_level), int):
                raise ConfigError(f"Unknown log level: {log_level}")

        return cls(
            space=SpaceSettings(**space),
            matcher=MatcherSettings(**matcher),
            types=types,
            log_level=log_level,
        )

    def apply(self, registry: Optional[TypeRegistry] = None) -> None:
        """Register the configured types and set the package log level."""
        registry = registry if registry is not None else TYPES
        for type_spec in self.types:
            try:
                registry.register(type_spec.name, type_spec.parent)
            except ValidationError as exc:
                raise ConfigError(f"Cannot register type {type_spec.name}: {exc}") from exc
        if self.log_level is not None:
            logging.getLogger("hyperkb").setLevel(self.log_level)
        _log.debug("Applied settings: %d extra types, log level %s", len(self.types), self.log_level)

    def build_space(self) -> AtomSpace:
        return AtomSpace(audit=self.space.audit)

    def build_matcher(self, space: AtomSpace) -> PatternMatcher:
        return PatternMatcher(
            space,
            max_depth=self.matcher.max_depth,
            max_steps=self.matcher.max_steps,
            strict_literals=self.matcher.strict_literals,
        )


def load_settings(source: Union[str, Path]) -> Settings:
    """Read settings from a .toml, .yaml or .yml file."""
    path = Path(source)
    if not path.exists():
        raise ConfigError(f"Settings file not found: {path}")

    suffix = path.suffix.lower()
    try:
        if suffix == ".toml":
            data = tomllib.loads(path.read_text())
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(path.read_text())
        else:
            raise ConfigError(f"Unsupported settings format: {path.name}")
    except (tomllib.TOMLDecodeError, yaml.YAMLError) as exc:
        raise ConfigError(f"Cannot parse {path}: {exc}") from exc

    _log.debug("Loaded settings from %s", path)
    return Settings.from_dict(data)
