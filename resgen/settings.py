"""Run settings and the fixed source image requirements."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Source images must be square and exactly this many pixels per side
ICON_SIZE = 1024
SPLASH_SIZE = 2732

DEFAULT_ICON = Path("resources") / "icon.png"
DEFAULT_SPLASH = Path("resources") / "splash.png"
DEFAULT_OUTPUT_DIR = Path("resources")


@dataclass(frozen=True)
class Settings:
    icon_path: Path = DEFAULT_ICON
    splash_path: Path = DEFAULT_SPLASH
    platforms: Optional[str] = None  # raw comma separated filter, None = all
    output_dir: Path = DEFAULT_OUTPUT_DIR

    @classmethod
    def from_args(cls, args) -> "Settings":
        """Build settings from parsed CLI arguments, applying defaults."""
        return cls(
            icon_path=Path(args.icon) if args.icon else DEFAULT_ICON,
            splash_path=Path(args.splash) if args.splash else DEFAULT_SPLASH,
            platforms=args.platforms or None,
            output_dir=Path(args.outputdir) if args.outputdir else DEFAULT_OUTPUT_DIR,
        )
