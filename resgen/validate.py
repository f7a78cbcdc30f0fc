"""
Input checks run before anything is written.

Each check reports one status line and raises on failure; the first
failure stops the remaining checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image

from . import display
from .errors import (DimensionMismatch, ImageLoadError, OutputDirNotFound, RegistryError,
                     UnknownPlatforms)
from .registry import DefinitionSet, definition_sets, platform_ids
from .settings import ICON_SIZE, SPLASH_SIZE, Settings

# Modes Pillow resamples with LANCZOS and writes as PNG without conversion
KEEP_MODES = ("L", "LA", "RGB", "RGBA", "I", "I;16")


@dataclass(frozen=True)
class SourceImages:
    icon: Image.Image
    splash: Image.Image


@dataclass(frozen=True)
class ValidatedInputs:
    """What generation needs once every check has passed."""

    platforms: tuple[str, ...]
    definition_sets: tuple[DefinitionSet, ...]
    images: SourceImages


def select_platforms(platform_filter: Optional[str]) -> list[str]:
    """Resolve a comma separated platform filter against the registry.

    No filter (or a blank one) selects every platform in registry order.
    Otherwise the tokens are returned in the order given, duplicates
    included; a single unknown token rejects the whole selection.
    """
    known = platform_ids()

    if not platform_filter or not platform_filter.strip():
        display.success("Processing files for all platforms")
        return known

    tokens = [token.strip() for token in platform_filter.split(",")]
    selected = [token for token in tokens if token in known]
    unknown = [token for token in tokens if token not in known]

    if unknown:
        display.error(f"Bad platforms: {', '.join(unknown)}")
        raise UnknownPlatforms(unknown)

    display.success(f"Processing files for: {', '.join(selected)}")
    return selected


def resolve_definition_sets(platforms) -> list[DefinitionSet]:
    """Read the definition sets of every selected platform, in selection order."""
    sets = []
    for platform in platforms:
        try:
            sets.extend(definition_sets(platform))
        except RegistryError as e:
            display.error(f"Bad definitions for {platform} ({e})")
            raise
    return sets


def normalize_mode(image: Image.Image) -> Image.Image:
    """Detached copy of image in a mode that can be resampled and saved as PNG.

    Palette and other transparent images become RGBA, bilevel and float
    images become L, anything else (CMYK, YCbCr, ...) becomes RGB.
    """
    if image.mode in KEEP_MODES:
        return image.copy()
    if image.mode in ("P", "PA") or "transparency" in image.info:
        return image.convert("RGBA")
    if image.mode in ("1", "F"):
        return image.convert("L")
    return image.convert("RGB")


def _load_square_image(kind, path, expected) -> Image.Image:
    try:
        with Image.open(path) as opened:
            opened.load()
            image = normalize_mode(opened)
    except (OSError, ValueError, Image.DecompressionBombError) as e:
        display.error(f"Could not load {kind} file ({path})")
        raise ImageLoadError(kind, path) from e

    width, height = image.size
    if width != expected or height != expected:
        display.error(f"Bad {kind} file ({width}x{height})")
        raise DimensionMismatch(kind, expected, (width, height))

    display.success(f"{kind.capitalize()} file ok ({width}x{height})")
    return image


def load_icon(path) -> Image.Image:
    """Load the icon source; it must be exactly 1024x1024."""
    return _load_square_image("icon", path, ICON_SIZE)


def load_splash(path) -> Image.Image:
    """Load the splash source; it must be exactly 2732x2732."""
    return _load_square_image("splash", path, SPLASH_SIZE)


def load_images(settings: Settings) -> SourceImages:
    # Splash is only looked at once the icon has passed
    icon = load_icon(settings.icon_path)
    splash = load_splash(settings.splash_path)
    return SourceImages(icon=icon, splash=splash)


def check_output_dir(path) -> Path:
    path = Path(path)
    if not path.is_dir():
        display.error(f"Output directory not found ({path})")
        raise OutputDirNotFound(path)

    display.success(f"Output directory ok ({path})")
    return path


def validate(settings: Settings) -> ValidatedInputs:
    """Run every input check in order and return what generation needs."""
    display.header("Checking files and directories")

    platforms = select_platforms(settings.platforms)
    sets = resolve_definition_sets(platforms)
    images = load_images(settings)
    check_output_dir(settings.output_dir)

    return ValidatedInputs(platforms=tuple(platforms), definition_sets=tuple(sets), images=images)
