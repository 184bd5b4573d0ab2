"""Test configuration management."""

import tomllib
from pathlib import Path

import pytest

from vidcat.config.config import Config
from vidcat.config.paths import default_config_path


def test_default_config(fresh_config: Path) -> None:
    """Loading without a file creates a default configuration at the portable location."""

    config = Config.load()

    assert config.catalog_file is None
    assert config.report_file is None
    assert config.log_file is None
    assert config.atomic_writes is False
    assert config.skip_malformed_records is False
    assert default_config_path() == fresh_config / "config" / "config.toml"
    assert default_config_path().exists()


def test_resolved_paths_fall_back_to_data_dir(fresh_config: Path) -> None:
    config = Config()

    assert config.resolved_catalog_file == fresh_config / ".data" / "catalog.txt"
    assert config.resolved_report_file == fresh_config / ".data" / "index.html"


def test_save_load_toml(fresh_config: Path) -> None:
    """Saved values come back with the right types."""

    _ = fresh_config
    original_config = Config(
        catalog_file=Path("/videos/catalog.txt"),
        report_file=Path("/videos/index.html"),
        log_file=Path("/test/logs/vidcat.log"),
        atomic_writes=True,
    )
    original_config.save()

    Config._instance = None  # pyright: ignore[reportPrivateUsage] - reset singleton for test
    loaded_config = Config.load()

    assert loaded_config.catalog_file == Path("/videos/catalog.txt")
    assert loaded_config.report_file == Path("/videos/index.html")
    assert loaded_config.log_file == Path("/test/logs/vidcat.log")
    assert loaded_config.atomic_writes is True
    assert loaded_config.skip_malformed_records is False
    assert loaded_config.resolved_catalog_file == Path("/videos/catalog.txt")


def test_empty_paths_load_as_none(fresh_config: Path) -> None:
    default_config_path().parent.mkdir(parents=True, exist_ok=True)
    _ = default_config_path().write_text('catalog_file = ""\nreport_file = "  "\n', encoding="utf-8")

    loaded = Config.load()

    assert loaded.catalog_file is None
    assert loaded.report_file is None
    assert loaded.resolved_catalog_file == fresh_config / ".data" / "catalog.txt"


def test_unknown_keys_are_ignored(fresh_config: Path, caplog: pytest.LogCaptureFixture) -> None:
    _ = fresh_config
    default_config_path().parent.mkdir(parents=True, exist_ok=True)
    _ = default_config_path().write_text(
        'base_path = "/music"\nskip_malformed_records = true\n', encoding="utf-8"
    )

    with caplog.at_level("WARNING", logger="vidcat"):
        loaded = Config.load()

    assert loaded.skip_malformed_records is True
    assert any("base_path" in message for message in caplog.messages)


def test_invalid_toml_raises(fresh_config: Path) -> None:
    _ = fresh_config
    default_config_path().parent.mkdir(parents=True, exist_ok=True)
    _ = default_config_path().write_text("catalog_file = [", encoding="utf-8")

    with pytest.raises(tomllib.TOMLDecodeError):
        _ = Config.load()


def test_singleton_behavior(fresh_config: Path) -> None:
    """Repeated loads return the same instance."""

    _ = fresh_config
    config1 = Config.load()
    config1.catalog_file = Path("/videos/one.txt")
    config1.save()

    config2 = Config.load()
    assert config2 is config1
    assert config2.catalog_file == Path("/videos/one.txt")


def test_toml_comments(fresh_config: Path) -> None:
    """The written file documents every option."""

    _ = fresh_config
    Config(catalog_file=Path("/videos/catalog.txt")).save()

    content = default_config_path().read_text(encoding="utf-8")

    assert "# vidcat Configuration File" in content
    assert "# Catalog file (optional)" in content
    assert "# Report file (optional)" in content
    assert "# Log file path (optional)" in content
    assert 'catalog_file = "/videos/catalog.txt"' in content
    assert "atomic_writes = false" in content
    assert "\nreport_file =" not in content
