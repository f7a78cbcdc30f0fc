"""Runs the checks and then the generation for one set of settings."""

from __future__ import annotations

from . import display
from .generate import generate
from .settings import Settings
from .validate import validate


def run(settings: Settings):
    """Validate inputs and generate every selected resource.

    Any ``ResGenError`` propagates to the caller untouched; nothing written
    before the failure is rolled back.
    """
    inputs = validate(settings)
    written = generate(inputs.images, settings, inputs.definition_sets)

    display.success("Successfully generated all files")
    display.info(f"{len(written)} files written to {settings.output_dir}")
    return written
