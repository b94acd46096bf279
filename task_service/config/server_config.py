"""
Server configuration - Settings for the HTTP server process
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict

from task_service.config.config_properties import ConfigProperties
from task_service.utils.exceptions import ConfigurationError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class RunMode(str, Enum):
    """Supported run modes"""
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TEST = "test"


@dataclass
class ServerConfig:
    """
    Configuration for the HTTP server.

    Attributes:
        host: Interface to bind
        port: TCP port to bind (1-65535)
        environment: Run mode (development, production, test)
        log_level: Logging level name for the service and uvicorn
    """

    host: str = "127.0.0.1"
    port: int = 3000
    environment: str = RunMode.DEVELOPMENT.value
    log_level: str = "INFO"

    def __post_init__(self):
        """Validate server configuration."""
        if isinstance(self.port, bool) or not isinstance(self.port, int):
            raise ConfigurationError("port", "Port must be an integer", "1-65535", self.port)
        if not 1 <= self.port <= 65535:
            raise ConfigurationError("port", "Port out of range", "1-65535", self.port)

        if isinstance(self.environment, RunMode):
            self.environment = self.environment.value
        self.environment = str(self.environment).strip().lower()
        valid_modes = [m.value for m in RunMode]
        if self.environment not in valid_modes:
            raise ConfigurationError(
                "environment",
                f"Run mode must be one of {valid_modes}",
                valid_modes,
                self.environment,
            )

        self.log_level = str(self.log_level).strip().upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError("log_level", "Unknown logging level", LOG_LEVELS, self.log_level)

    @property
    def is_production(self) -> bool:
        return self.environment == RunMode.PRODUCTION.value

    @classmethod
    def from_env(cls, **overrides: Any) -> "ServerConfig":
        """
        Build configuration from TASK_SERVICE_* environment variables.

        Explicit keyword overrides (e.g. from the command line) win over the
        environment; ``None`` overrides are ignored.

        Raises:
            ConfigurationError: if a value is malformed or out of range
        """
        get_env = ConfigProperties.get_env
        values: Dict[str, Any] = {k: v for k, v in overrides.items() if v is not None}

        values.setdefault("host", get_env("TASK_SERVICE_HOST", "127.0.0.1"))
        values.setdefault(
            "environment",
            get_env("TASK_SERVICE_ENV") or get_env("APP_ENV") or RunMode.DEVELOPMENT.value,
        )
        values.setdefault("log_level", get_env("TASK_SERVICE_LOG_LEVEL", "INFO"))

        # only consult the environment port when the caller did not pass one
        if "port" not in values:
            raw_port = get_env("TASK_SERVICE_PORT") or get_env("PORT") or "3000"
            try:
                values["port"] = int(raw_port)
            except ValueError:
                raise ConfigurationError("port", "Port must be an integer", "1-65535", raw_port)

        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "host": self.host,
            "port": self.port,
            "environment": self.environment,
            "log_level": self.log_level,
            "is_production": self.is_production,
        }
