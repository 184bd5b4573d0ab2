"""Configuration management for vidcat."""
import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from vidcat.config.file_ops import write_text_file
from vidcat.config.paths import default_catalog_path, default_config_path, default_report_path
from vidcat.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Flat-text catalog holding one record per title
    catalog_file: Path | None = _path_field()

    # HTML report regenerated after every successful save
    report_file: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Stage catalog writes in a temporary file and rename into place
    atomic_writes: bool = False

    # Drop malformed catalog records on load instead of aborting
    skip_malformed_records: bool = False

    # Singleton instance
    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value else None)

    @property
    def resolved_catalog_file(self) -> Path:
        """Catalog path, falling back to the portable default."""

        return self.catalog_file or default_catalog_path()

    @property
    def resolved_report_file(self) -> Path:
        """Report path, falling back to the portable default."""

        return self.report_file or default_report_path()

    def save(self) -> None:
        """Save configuration to file."""
        config_dict = asdict(self)

        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        try:
            target = default_config_path()
            content = self._render_toml(config_dict)
            write_text_file(target, content)
            logger.info("Configuration saved to %s", target)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# vidcat Configuration File")
        lines.append("")

        lines.append("# Catalog file (optional)")
        lines.append("# Flat-text store with one ';'-separated record per title")
        lines.append('# Example: catalog_file = "/path/to/videos/catalog.txt"')
        if config["catalog_file"] is not None:
            lines.append(f"catalog_file = {self._format_toml_value(config['catalog_file'])}")
        lines.append("")

        lines.append("# Report file (optional)")
        lines.append("# HTML table rewritten after every successful save")
        lines.append('# Example: report_file = "/path/to/videos/index.html"')
        if config["report_file"] is not None:
            lines.append(f"report_file = {self._format_toml_value(config['report_file'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        lines.append('# Example: log_file = "/path/to/logs/vidcat.log"')
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Write the catalog through a temporary file and rename it into place")
        lines.append(f"atomic_writes = {self._format_toml_value(config['atomic_writes'])}")
        lines.append("")

        lines.append("# Skip malformed catalog records on load instead of refusing the catalog")
        lines.append(
            f"skip_malformed_records = {self._format_toml_value(config['skip_malformed_records'])}"
        )
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls) -> "Config":
        """Load configuration from file.

        Returns:
            Config: Loaded configuration object.
        """
        if cls._instance is not None:
            return cls._instance

        config_file = default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                _ = config_dict.setdefault("atomic_writes", False)
                _ = config_dict.setdefault("skip_malformed_records", False)

                known = {f.name for f in fields(cls)}
                for key in list(config_dict):
                    if key not in known:
                        logger.warning("Ignoring unknown configuration key: %s", key)
                        del config_dict[key]

                for key, value in config_dict.items():
                    if key.endswith("_file"):
                        if value and str(value).strip() != "":
                            config_dict[key] = str(value)
                        else:
                            config_dict[key] = None

                logger.info("Configuration loaded from %s", config_file)
                instance = cls(**config_dict)

                cls._instance = instance
                cls._loaded_from = config_file
                return instance

            config = cls()
            config.save()
            logger.info("Created default configuration at %s", config_file)
            cls._instance = config
            cls._loaded_from = config_file
            return config

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


__all__ = ["Config"]
