# =============================================================================
# Configuration Management
# =============================================================================
# Handles loading, saving, and validating epubgrid configuration.
#
# XDG Base Directory Compliance (https://specifications.freedesktop.org/basedir-spec/):
#   - Config:  $XDG_CONFIG_HOME/epubgrid/  (default: ~/.config/epubgrid/)
#
# Files:
#   - config.toml: Rendering and logging preferences
#
# Example config.toml:
#
#   [rendering]
#   width = 80
#   left_margin = 0
#   image_width = 80
#   render_images = true
#   gradient = "MND8OZ$7I?+=~:,.."
#
#   [logging]
#   level = "INFO"
#   file = "/tmp/epubgrid.log"
# =============================================================================

import logging
import os
import tomllib  # Built into Python 3.11+
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import tomli_w  # For writing TOML (tomllib is read-only)


# Application identifier used in XDG paths
APP_NAME = "epubgrid"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

# Default grid width in columns
DEFAULT_WIDTH = 80

# Default glyph grid width for images, in columns
DEFAULT_IMAGE_WIDTH = 80

# Image luminance glyphs, darkest first, lightest last
DEFAULT_GRADIENT = "MND8OZ$7I?+=~:,.."


def get_xdg_config_home() -> Path:
    """
    Returns the XDG config directory for epubgrid.

    Respects $XDG_CONFIG_HOME if set, otherwise uses ~/.config/epubgrid/
    """
    xdg_config = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config:
        base = Path(xdg_config)
    else:
        base = Path.home() / ".config"
    return base / APP_NAME


# =============================================================================
# Configuration Data Structures
# =============================================================================

@dataclass
class RenderingConfig:
    """
    Configuration for the markup-to-grid renderer.

    Attributes:
        width: Grid width in columns.
        left_margin: Column that wrapped lines start at.
        image_width: Width of ASCII art blocks in glyphs.
        render_images: Convert <img> sources to ASCII art. Alt text is
                       shown either way.
        gradient: Glyphs used for image shading, darkest first.
    """
    width: int = DEFAULT_WIDTH
    left_margin: int = 0
    image_width: int = DEFAULT_IMAGE_WIDTH
    render_images: bool = True
    gradient: str = DEFAULT_GRADIENT


@dataclass
class LoggingConfig:
    """
    Configuration for logging.

    Attributes:
        level: Root logger level name ("DEBUG", "INFO", ...).
        file: Optional path of a log file, in addition to stderr.
    """
    level: str = "WARNING"
    file: str | None = None


@dataclass
class Config:
    """
    Main configuration container for epubgrid.

    Usage:
        >>> config = Config.load()
        >>> config.rendering.width
        80
    """
    rendering: RenderingConfig = field(default_factory=RenderingConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @staticmethod
    def config_file_path() -> Path:
        """Returns the path to the main config file."""
        return get_xdg_config_home() / "config.toml"

    # -------------------------------------------------------------------------
    # Loading and Saving
    # -------------------------------------------------------------------------

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """
        Load configuration from a TOML file.

        If the file doesn't exist, returns default configuration.

        Args:
            path: Config file to read. Defaults to the XDG location.

        Raises:
            ConfigError: If the file exists but is invalid.
        """
        config_path = path or cls.config_file_path()

        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "rb") as f:
                data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid config file: {e}") from e

        config = cls._from_dict(data)
        config.validate()
        return config

    def save(self, path: Path | None = None) -> None:
        """
        Save configuration to a TOML file, creating its directory if needed.
        """
        config_path = path or self.config_file_path()
        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "wb") as f:
            tomli_w.dump(self._to_dict(), f)

    def validate(self) -> None:
        """
        Check that values are usable.

        Raises:
            ConfigError: On the first invalid value found.
        """
        rendering = self.rendering
        for name in ("width", "left_margin", "image_width"):
            value = getattr(rendering, name)
            # bool is an int subclass, but `width = true` is still a mistake
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigError(f"rendering.{name} must be an integer, got {value!r}")
        if not isinstance(rendering.gradient, str):
            raise ConfigError(f"rendering.gradient must be a string, got {rendering.gradient!r}")
        if not isinstance(rendering.render_images, bool):
            raise ConfigError(
                f"rendering.render_images must be true or false, got {rendering.render_images!r}"
            )
        if not isinstance(self.logging.level, str):
            raise ConfigError(f"logging.level must be a string, got {self.logging.level!r}")
        if self.logging.file is not None and not isinstance(self.logging.file, str):
            raise ConfigError(f"logging.file must be a path string, got {self.logging.file!r}")

        if rendering.width <= 0:
            raise ConfigError(f"rendering.width must be positive, got {rendering.width}")
        if rendering.left_margin < 0 or rendering.left_margin >= rendering.width:
            raise ConfigError(
                f"rendering.left_margin must be in [0, {rendering.width}), "
                f"got {rendering.left_margin}"
            )
        if rendering.image_width <= 0:
            raise ConfigError(
                f"rendering.image_width must be positive, got {rendering.image_width}"
            )
        if len(rendering.gradient) < 2:
            raise ConfigError("rendering.gradient needs at least two glyphs")
        if not isinstance(logging.getLevelName(self.logging.level.upper()), int):
            raise ConfigError(f"Unknown logging.level: {self.logging.level}")

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> "Config":
        """Create a Config object from a dictionary (parsed TOML)."""
        config = cls()

        rendering = data.get("rendering", {})
        config.rendering = RenderingConfig(
            width=rendering.get("width", DEFAULT_WIDTH),
            left_margin=rendering.get("left_margin", 0),
            image_width=rendering.get("image_width", DEFAULT_IMAGE_WIDTH),
            render_images=rendering.get("render_images", True),
            gradient=rendering.get("gradient", DEFAULT_GRADIENT),
        )

        log = data.get("logging", {})
        config.logging = LoggingConfig(
            level=log.get("level", "WARNING"),
            file=log.get("file"),
        )

        return config

    def _to_dict(self) -> dict[str, Any]:
        """Convert Config to a dictionary for TOML serialization."""
        data: dict[str, Any] = {}

        data["rendering"] = {
            "width": self.rendering.width,
            "left_margin": self.rendering.left_margin,
            "image_width": self.rendering.image_width,
            "render_images": self.rendering.render_images,
            "gradient": self.rendering.gradient,
        }

        # TOML has no null, so an unset file is simply left out
        data["logging"] = {"level": self.logging.level}
        if self.logging.file:
            data["logging"]["file"] = self.logging.file

        return data


# =============================================================================
# Exceptions
# =============================================================================

class ConfigError(Exception):
    """Raised when there's an error loading or parsing configuration."""
    pass


# =============================================================================
# Logging Setup
# =============================================================================

def setup_logging(config: LoggingConfig, debug: bool = False) -> None:
    """
    Configure the root logger from the logging section.

    Args:
        config: Logging configuration.
        debug: Force DEBUG level regardless of config.
    """
    level = logging.DEBUG if debug else logging.getLevelName(config.level.upper())
    logging.basicConfig(level=level, format=LOG_FORMAT)

    if config.file:
        handler = logging.FileHandler(config.file, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logging.getLogger().addHandler(handler)
