import pytest
from PIL import Image

from resgen import registry
from resgen.errors import DimensionMismatch, RegistryError, UnknownPlatforms
from resgen.pipeline import run


def expected_outputs(platform, output_dir):
    outputs = {}
    for definition_set in registry.definition_sets(platform):
        for definition in definition_set.definitions:
            if definition_set.type == "icon":
                size = (definition.size, definition.size)
            else:
                size = (definition.width, definition.height)
            outputs[output_dir / definition_set.path / definition.name] = size
    return outputs


def test_android_end_to_end(make_settings, tmp_path):
    written = run(make_settings(platforms="android"))

    expected = expected_outputs("android", tmp_path)
    assert set(written) == set(expected)
    for path, size in expected.items():
        with Image.open(path) as image:
            assert image.size == size

    produced = {p for p in tmp_path.rglob("*") if p.is_file()}
    assert produced == set(expected)


def test_unknown_platform_writes_nothing(make_settings, tmp_path):
    with pytest.raises(UnknownPlatforms):
        run(make_settings(platforms="android,bogus"))

    assert list(tmp_path.iterdir()) == []


def test_small_icon_fails_before_splash(make_settings, sources, tmp_path, capsys):
    with pytest.raises(DimensionMismatch) as excinfo:
        run(make_settings(icon_path=sources.small_icon, splash_path=sources.missing))

    assert excinfo.value.kind == "icon"
    assert "splash" not in capsys.readouterr().out.lower()
    assert list(tmp_path.iterdir()) == []


def test_rerun_produces_identical_files(make_settings, tmp_path):
    settings = make_settings(platforms="blackberry10,windows")

    first = {path: path.read_bytes() for path in run(settings)}
    second = {path: path.read_bytes() for path in run(settings)}

    assert first == second


def test_summary_printed_last(make_settings, tmp_path, capsys):
    run(make_settings(platforms="blackberry10"))

    lines = [line.strip() for line in capsys.readouterr().out.strip().splitlines()]
    assert lines[-2:] == [
        "✔  Successfully generated all files",
        f"2 files written to {tmp_path}",
    ]


def test_cmyk_jpeg_icon(make_settings, tmp_path_factory, tmp_path):
    icon = tmp_path_factory.mktemp("cmyk") / "icon.jpg"
    Image.new("CMYK", (1024, 1024), (0, 80, 80, 0)).save(icon)

    written = run(make_settings(icon_path=icon, platforms="blackberry10"))

    assert len(written) == 2
    with Image.open(tmp_path / "blackberry10" / "icon" / "icon-86.png") as image:
        assert image.mode == "RGB"
        assert image.size == (86, 86)


def test_broken_definitions_fail_before_any_write(make_settings, monkeypatch, tmp_path, capsys):
    monkeypatch.setitem(registry.PLATFORMS, "android", ["icons/android.json", "splash/missing.json"])

    with pytest.raises(RegistryError):
        run(make_settings(platforms="blackberry10,android"))

    assert list(tmp_path.iterdir()) == []
    out = capsys.readouterr().out
    assert "Bad definitions for android" in out
    assert "Icon file" not in out
