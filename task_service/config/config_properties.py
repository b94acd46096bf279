"""
Configuration Properties - environment bootstrap for the task service.

Settings reach the process in three layers, highest priority first:
the OS environment, a ``.env`` file (python-dotenv), and ``config.properties``.
Both files only fill in keys the environment does not already define, so
every consumer reads plain environment variables through the ``get_*_env``
accessors below.
"""

import os
from pathlib import Path
from typing import Dict, Optional

from dotenv import load_dotenv

TRUE_VALUES = ("true", "1", "yes", "on")


class ConfigProperties:
    """
    Loads config files into ``os.environ`` and reads typed values back out.

    Quick usage::

        ConfigProperties.load_env_file()          # once, at process start
        port = ConfigProperties.get_env("TASK_SERVICE_PORT", "3000")
        to_file = ConfigProperties.get_bool_env("TASK_SERVICE_ENABLE_FILE_LOGGING")
    """

    _properties: Dict[str, str] = {}
    _loaded: bool = False

    @classmethod
    def load(cls, path: Optional[str] = None) -> Dict[str, str]:
        """
        Parse config.properties and return the parsed key/value pairs.

        An explicit *path* is always re-read; without one, the auto-discovered
        file is parsed once and cached.
        """
        if cls._loaded and path is None:
            return dict(cls._properties)

        cls._properties = {}
        config_path = Path(path) if path else cls._find_config_file()
        if config_path and config_path.exists():
            cls._parse_file(config_path)

        cls._loaded = True
        return dict(cls._properties)

    @classmethod
    def load_env_file(cls, path: Optional[str] = None, dotenv_path: Optional[str] = None) -> bool:
        """
        Load .env (if present) and config.properties into os.environ.

        Values already present in the OS environment are never overwritten.

        Args:
            path: Explicit path to config.properties; auto-discovered if omitted.
            dotenv_path: Explicit path to a .env file; auto-discovered if omitted.

        Returns:
            True if either file contributed any settings.
        """
        env_path = Path(dotenv_path) if dotenv_path else cls._find_upwards(".env")
        loaded_dotenv = False
        if env_path and env_path.exists():
            loaded_dotenv = load_dotenv(env_path, override=False)

        cls.load(path)
        cls.load_to_env()
        return loaded_dotenv or bool(cls._properties)

    @classmethod
    def load_to_env(cls) -> None:
        """
        Copy plain keys from config.properties into os.environ.

        Dot-notation keys are not valid variable names and are skipped.
        """
        if not cls._loaded:
            cls.load()

        for key, value in cls._properties.items():
            if "." in key or key in os.environ:
                continue
            os.environ[key] = value

    @staticmethod
    def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
        """Get an environment variable, treating an empty value as unset."""
        value = os.getenv(key)
        if value is None or value.strip() == "":
            return default
        return value

    @classmethod
    def get_bool_env(cls, key: str, default: bool = False) -> bool:
        """Get a boolean from an environment variable."""
        value = cls.get_env(key)
        if value is None:
            return default
        return value.strip().lower() in TRUE_VALUES

    @classmethod
    def get_int_env(cls, key: str, default: int = 0) -> int:
        """Get an integer from an environment variable, falling back to *default* if malformed."""
        value = cls.get_env(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            return default

    @classmethod
    def _find_config_file(cls) -> Optional[Path]:
        """Prefer config.properties at the project root, else search upwards from the cwd."""
        fixed = Path(__file__).parent.parent.parent / "config.properties"
        if fixed.exists():
            return fixed
        return cls._find_upwards("config.properties")

    @staticmethod
    def _find_upwards(filename: str) -> Optional[Path]:
        """Look for *filename* in the cwd and up to three parent directories."""
        current = Path.cwd()
        for _ in range(4):
            candidate = current / filename
            if candidate.exists():
                return candidate
            if current.parent == current:
                break
            current = current.parent
        return None

    @classmethod
    def _parse_file(cls, path: Path) -> None:
        """Parse ``key=value`` / ``key: value`` lines; ``#`` and ``!`` start comments."""
        with open(path, "r", encoding="utf-8") as f:
            for raw in f:
                line = raw.strip()
                if not line or line[0] in "#!":
                    continue
                positions = [i for i in (line.find("="), line.find(":")) if i >= 0]
                if not positions:
                    continue
                split_at = min(positions)
                cls._properties[line[:split_at].strip()] = line[split_at + 1:].strip()
