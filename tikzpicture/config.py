import logging
from pathlib import Path
from typing import Any, Dict, Optional
import yaml
from blinker import Signal

logger = logging.getLogger(__name__)


class PictureConfig:
    """
    Output settings of a TikzPicture. Changing a setting through one
    of the set_* methods sends the `changed` signal, with the name of
    the setting as the `field` keyword.
    """

    def __init__(self) -> None:
        self.precision: int = 2
        self.indent: str = "    "
        self.environment: str = "tikzpicture"
        self.scope_environment: str = "scope"
        self.changed = Signal()

    def set_precision(self, precision: int) -> None:
        precision = max(0, int(precision))
        if self.precision == precision:
            return
        self.precision = precision
        self.changed.send(self, field="precision")

    def set_indent(self, indent: str) -> None:
        if self.indent == indent:
            return
        self.indent = indent
        self.changed.send(self, field="indent")

    def set_environment(self, environment: str) -> None:
        if not environment:
            raise ValueError("Environment name cannot be empty.")
        if self.environment == environment:
            return
        self.environment = environment
        self.changed.send(self, field="environment")

    def set_scope_environment(self, environment: str) -> None:
        if not environment:
            raise ValueError("Scope environment name cannot be empty.")
        if self.scope_environment == environment:
            return
        self.scope_environment = environment
        self.changed.send(self, field="scope_environment")

    def to_dict(self) -> Dict[str, Any]:
        return {
            "precision": self.precision,
            "indent": self.indent,
            "environment": self.environment,
            "scope_environment": self.scope_environment,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PictureConfig":
        config = cls()
        try:
            config.precision = max(
                0, int(data.get("precision", config.precision))
            )
        except (TypeError, ValueError) as e:
            raise ValueError(
                f"Invalid precision in config: {data.get('precision')!r}"
            ) from e
        config.indent = str(data.get("indent", config.indent))
        config.environment = str(
            data.get("environment") or config.environment
        )
        config.scope_environment = str(
            data.get("scope_environment") or config.scope_environment
        )
        return config


class ConfigManager:
    """Loads and saves a PictureConfig as a YAML file."""

    def __init__(self, filepath: Path):
        self.filepath = Path(filepath)
        self.config: Optional[PictureConfig] = None

        self.load_config()

    def save(self) -> None:
        if self.config is None:
            return
        with open(self.filepath, "w") as f:
            yaml.safe_dump(self.config.to_dict(), f)
        logger.debug(f"Saved picture config to {self.filepath}")

    def load_config(self) -> PictureConfig:
        if not self.filepath.exists():
            self.config = PictureConfig()  # Return a default config
            return self.config

        with open(self.filepath, "r") as f:
            data = yaml.safe_load(f)
        if not data:
            self.config = PictureConfig()
            return self.config

        self.config = PictureConfig.from_dict(data)
        logger.debug(f"Loaded picture config from {self.filepath}")
        return self.config
