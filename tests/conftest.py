from types import SimpleNamespace

import pytest
from PIL import Image

from resgen.settings import Settings


@pytest.fixture(scope="session")
def sources(tmp_path_factory):
    """Source images written once per session; the splash is large to encode."""
    base = tmp_path_factory.mktemp("sources")

    icon = base / "icon.png"
    Image.new("RGBA", (1024, 1024), (200, 30, 30, 255)).save(icon)

    splash = base / "splash.png"
    Image.new("RGB", (2732, 2732), (20, 40, 200)).save(splash)

    small_icon = base / "icon-512.png"
    Image.new("RGBA", (512, 512), (0, 0, 0, 255)).save(small_icon)

    not_an_image = base / "icon.txt"
    not_an_image.write_text("not a png", encoding="utf-8")

    return SimpleNamespace(
        icon=icon,
        splash=splash,
        small_icon=small_icon,
        not_an_image=not_an_image,
        missing=base / "missing.png",
    )


@pytest.fixture
def make_settings(sources, tmp_path):
    def _make(**overrides):
        values = {
            "icon_path": sources.icon,
            "splash_path": sources.splash,
            "platforms": None,
            "output_dir": tmp_path,
        }
        values.update(overrides)
        return Settings(**values)

    return _make
