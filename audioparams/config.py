"""Runtime configuration read from environment variables."""

import os
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class SystemConfig:
    """Logging settings.

    Fields:
        log_level: Standard logging level name
        log_format: "console" for human readable output, "json" for log shipping
        log_file: Optional file that receives a copy of every log line
    """

    log_level: str = "INFO"
    log_format: str = "console"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "SystemConfig":
        return cls(
            log_level=os.getenv("AUDIOPARAMS_LOG_LEVEL", "INFO"),
            log_format=os.getenv("AUDIOPARAMS_LOG_FORMAT", "console").lower(),
            log_file=os.getenv("AUDIOPARAMS_LOG_FILE") or None,
        )


@dataclass
class Config:
    system: SystemConfig = field(default_factory=SystemConfig)

    @classmethod
    def from_env(cls) -> "Config":
        return cls(system=SystemConfig.from_env())


config = Config.from_env()
