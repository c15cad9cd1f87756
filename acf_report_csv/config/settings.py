"""Configuration management for the ACF report conversion pipeline.

This module provides configuration loading and validation from YAML files.
Input/output locations, the yearly report list and header names are all
centralized here instead of being hardcoded in the conversion code.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional
import yaml
from dataclasses import dataclass, field


DEFAULT_GENDER_HEADER = ["StateId", "Year", "Male", "Female", "Total", "Missing"]
DEFAULT_BINARY_HEADER = ["StateId", "Year", "Yes", "No", "Total", "Missing"]


@dataclass
class PathConfig:
    """Path configuration container."""

    input_root: Path
    pdf_subdir: Path
    templates: Path
    output: Path
    state_table: Path


@dataclass
class ReportsConfig:
    """Report naming conventions and output header names."""

    yearly: List[str] = field(default_factory=list)
    gender_marker: str = "gender"
    gender_header: List[str] = field(default_factory=lambda: list(DEFAULT_GENDER_HEADER))
    binary_header: List[str] = field(default_factory=lambda: list(DEFAULT_BINARY_HEADER))


@dataclass
class ProcessingConfig:
    """Run behaviour configuration."""

    fail_fast: bool = True
    create_output_dir: bool = True


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None
    console: bool = True


@dataclass
class Settings:
    """Main settings container for the conversion pipeline.

    Attributes:
        project: Project metadata (name, version, root directory)
        paths: Input root, template, output and reference table locations
        reports: Yearly report labels, gender marker and CSV header names
        processing: Failure policy and output directory creation
        logging: Logging configuration
    """

    project: Dict[str, Any]
    paths: PathConfig
    reports: ReportsConfig
    processing: ProcessingConfig
    logging: LoggingConfig

    @classmethod
    def from_yaml(cls, config_path: Optional[str] = None) -> "Settings":
        """Load settings from YAML configuration file.

        Args:
            config_path: Path to YAML configuration file.
                        If None, uses default config/config.yaml

        Returns:
            Settings instance with loaded configuration

        Raises:
            FileNotFoundError: If config file doesn't exist
            yaml.YAMLError: If config file has invalid YAML syntax
            KeyError: If required configuration keys are missing
        """
        if config_path is None:
            possible_paths = [
                Path("config/config.yaml"),
                Path("../config/config.yaml"),
                Path(__file__).parent.parent.parent / "config" / "config.yaml",
            ]
            config_path = None
            for p in possible_paths:
                if p.exists():
                    config_path = p
                    break

            if config_path is None:
                raise FileNotFoundError(
                    "Could not find config/config.yaml. "
                    "Please create it or specify path explicitly."
                )
        else:
            config_path = Path(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        # Relative root_dir is taken from the project root (parent of config directory)
        root_dir = Path(config["project"].get("root_dir", "."))
        if not root_dir.is_absolute():
            if str(root_dir) == ".":
                root_dir = config_path.parent.parent.resolve()
            else:
                root_dir = (config_path.parent.parent / root_dir).resolve()

        paths_dict = config["paths"]
        input_root = root_dir / paths_dict["input_root"]
        path_config = PathConfig(
            input_root=input_root,
            pdf_subdir=input_root / paths_dict.get("pdf_subdir", "pdf"),
            templates=input_root / paths_dict.get("templates", "templates"),
            output=root_dir / paths_dict["output"],
            state_table=root_dir / paths_dict["state_table"],
        )

        reports_config = ReportsConfig(**(config.get("reports") or {}))
        processing_config = ProcessingConfig(**(config.get("processing") or {}))
        logging_config = LoggingConfig(**(config.get("logging") or {}))

        return cls(
            project=config["project"],
            paths=path_config,
            reports=reports_config,
            processing=processing_config,
            logging=logging_config,
        )

    def ensure_directories(self) -> None:
        """Create the output directory if configured to do so."""
        if self.processing.create_output_dir:
            self.paths.output.mkdir(parents=True, exist_ok=True)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings(config_path: Optional[str] = None, force_reload: bool = False) -> Settings:
    """Get or create global settings instance.

    Configuration is loaded only once unless explicitly reloaded.

    Args:
        config_path: Path to YAML configuration file. If None, uses default.
        force_reload: If True, reload settings even if already loaded.

    Returns:
        Settings instance with loaded configuration

    Example:
        >>> settings = get_settings()
        >>> print(settings.paths.output.name)
        output
    """
    global _settings

    if _settings is None or force_reload:
        _settings = Settings.from_yaml(config_path)
        _settings.ensure_directories()

    return _settings
