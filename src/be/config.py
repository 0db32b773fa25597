from __future__ import annotations

from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, field_validator


class BeConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")
    require: bool = False
    log_file: str | None = None
    verbose: bool = False

    @field_validator("log_file")
    @classmethod
    def expand_log_file(cls, v: str | None) -> str | None:
        """Expand ${VAR} references in the log file path.

        A reference without a default to an unset variable is rejected.
        """
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"log_file references a missing environment variable: {e}") from e


def load_config(path: Path) -> BeConfig:
    """Load and validate a be config from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f)

    config = BeConfig(**(raw or {}))

    # Resolve a relative log file relative to config file location
    if config.log_file is not None:
        log_path = Path(config.log_file)
        if not log_path.is_absolute():
            config.log_file = str((config_dir / log_path).resolve())

    return config
