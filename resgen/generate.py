"""
Generation of platform resources from the validated source images.

Platforms are processed in selection order and definitions in list order,
one file at a time. The first failure aborts the run; files already written
are left in place.
"""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from . import display
from .errors import WriteError
from .registry import ICON, DefinitionSet, IconDefinition, SplashDefinition
from .settings import Settings
from .validate import SourceImages


def center_crop_box(image_size, width, height):
    """Box (left, top, right, bottom) of a width x height area centred in image_size.

    Odd differences are floored, so the extra pixel ends up on the right/bottom.
    """
    image_width, image_height = image_size
    left = (image_width - width) // 2
    top = (image_height - height) // 2
    return (left, top, left + width, top + height)


def transform_icon(source: Image.Image, definition: IconDefinition) -> Image.Image:
    return source.resize((definition.size, definition.size), resample=Image.Resampling.LANCZOS)


def transform_splash(source: Image.Image, definition: SplashDefinition) -> Image.Image:
    return source.crop(center_crop_box(source.size, definition.width, definition.height))


def _write(image: Image.Image, output_path: Path) -> None:
    try:
        image.save(output_path)
    except (OSError, ValueError) as e:
        raise WriteError(output_path, e) from e


def generate_for_set(images: SourceImages, output_dir, definition_set: DefinitionSet) -> list[Path]:
    """Write every file of one definition set, returning the written paths."""
    set_dir = Path(output_dir) / definition_set.path
    try:
        set_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(set_dir, e) from e

    written = []
    for definition in definition_set.definitions:
        # resize() and crop() return new images, the sources stay untouched
        if definition_set.type == ICON:
            image = transform_icon(images.icon, definition)
        else:
            image = transform_splash(images.splash, definition)

        output_path = set_dir / definition.name
        _write(image, output_path)
        written.append(output_path)

    display.success(f"Generated {definition_set.type} files for {definition_set.platform}")
    return written


def generate(images: SourceImages, settings: Settings, sets) -> list[Path]:
    """Write every definition set, in the order resolved during validation."""
    display.header("Generating files")

    written = []
    for definition_set in sets:
        written.extend(generate_for_set(images, settings.output_dir, definition_set))
    return written
