"""
Platform registry

Maps each platform id to the definition sets (one per image type) that
describe the files to generate for it. The sets live as JSON files under
``resgen/platforms`` and are read when requested.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from importlib import resources
from typing import Union

from .errors import RegistryError
from .settings import ICON_SIZE, SPLASH_SIZE

ICON = "icon"
SPLASH = "splash"

# Registry order is the order platforms are processed in when no filter is given
PLATFORMS: dict[str, list[str]] = {
    "android": ["icons/android.json", "splash/android.json"],
    "ios": ["icons/ios.json", "splash/ios.json"],
    "windows": ["icons/windows.json", "splash/windows.json"],
    "blackberry10": ["icons/blackberry10.json"],
}


@dataclass(frozen=True)
class IconDefinition:
    name: str
    size: int


@dataclass(frozen=True)
class SplashDefinition:
    name: str
    width: int
    height: int


Definition = Union[IconDefinition, SplashDefinition]


@dataclass(frozen=True)
class DefinitionSet:
    """All outputs of one image type for one platform, sharing one subdirectory."""

    platform: str
    type: str
    path: str
    definitions: tuple[Definition, ...]


def platform_ids() -> list[str]:
    return list(PLATFORMS)


def _positive_int(value, field, source):
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise RegistryError(f"{source}: '{field}' must be a positive integer, got {value!r}")
    return value


def _parse_definition(kind, raw, source) -> Definition:
    name = raw.get("name")
    if not isinstance(name, str) or not name:
        raise RegistryError(f"{source}: definition without a name")

    if kind == ICON:
        size = _positive_int(raw.get("size"), "size", source)
        if size > ICON_SIZE:
            raise RegistryError(f"{source}: {name} is larger than the {ICON_SIZE}px icon")
        return IconDefinition(name=name, size=size)

    width = _positive_int(raw.get("width"), "width", source)
    height = _positive_int(raw.get("height"), "height", source)
    if width > SPLASH_SIZE or height > SPLASH_SIZE:
        raise RegistryError(f"{source}: {name} is larger than the {SPLASH_SIZE}px splash")
    return SplashDefinition(name=name, width=width, height=height)


def parse_definition_set(data, source="<memory>") -> DefinitionSet:
    """Validate a decoded definition set and turn it into a DefinitionSet."""
    if not isinstance(data, dict):
        raise RegistryError(f"{source}: expected an object")

    kind = data.get("type")
    if kind not in (ICON, SPLASH):
        raise RegistryError(f"{source}: unknown type {kind!r}")

    platform = data.get("platform")
    path = data.get("path")
    if not isinstance(platform, str) or not isinstance(path, str):
        raise RegistryError(f"{source}: 'platform' and 'path' must be strings")

    raw_definitions = data.get("definitions")
    if not isinstance(raw_definitions, list):
        raise RegistryError(f"{source}: 'definitions' must be a list")

    definitions = tuple(_parse_definition(kind, raw, source) for raw in raw_definitions)
    return DefinitionSet(platform=platform, type=kind, path=path, definitions=definitions)


def load_definition_set(resource) -> DefinitionSet:
    """Read one of the bundled JSON definition files."""
    ref = resources.files(__package__) / "platforms"
    for part in resource.split("/"):
        ref = ref / part
    try:
        data = json.loads(ref.read_text(encoding="utf-8"))
    except (OSError, ValueError) as e:
        raise RegistryError(f"{resource}: {e}") from e
    return parse_definition_set(data, source=resource)


def definition_sets(platform) -> list[DefinitionSet]:
    """Definition sets for a platform, in declared order."""
    try:
        refs = PLATFORMS[platform]
    except KeyError:
        raise RegistryError(f"Unknown platform: {platform}") from None
    return [load_definition_set(ref) for ref in refs]
