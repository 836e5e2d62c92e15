"""
Solver configuration.

Holds the location of the minizinc executable (and an optional timeout)
as an explicit value passed into evaluation, instead of process-wide state.

Resolution order for `SolverConfig.from_env_or_file()`:
    1. MINIZINC_PATH environment variable
    2. YAML file named by MZNBRIDGE_CONFIG (keys: executable, timeout)
    3. `minizinc` found on PATH
    4. Empty config (evaluation will raise ConfigurationError)
"""

import logging
import os
import shutil
from dataclasses import dataclass
from typing import Optional

import yaml

from mznbridge.errors import ConfigurationError

logger = logging.getLogger(__name__)

ENV_EXECUTABLE = "MINIZINC_PATH"
ENV_CONFIG_FILE = "MZNBRIDGE_CONFIG"


@dataclass
class SolverConfig:
    """
    Properties:
        executable: Path to the minizinc executable (None if not set)
        timeout: Seconds to wait for the solver; None waits forever
    """

    executable: Optional[str] = None
    timeout: Optional[float] = None

    def require_executable(self) -> str:
        if not self.executable:
            raise ConfigurationError(
                f"Path to MiniZinc is not set. Pass SolverConfig(executable=...) "
                f"or set {ENV_EXECUTABLE}."
            )
        return self.executable

    @staticmethod
    def from_yaml(path: str) -> "SolverConfig":
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config file {path} must contain a mapping")
        timeout = data.get("timeout")
        return SolverConfig(
            executable=data.get("executable"),
            timeout=float(timeout) if timeout is not None else None,
        )

    @staticmethod
    def from_env_or_file() -> "SolverConfig":
        env_path = os.environ.get(ENV_EXECUTABLE)
        if env_path:
            logger.debug("Using minizinc from %s: %s", ENV_EXECUTABLE, env_path)
            return SolverConfig(executable=env_path)

        config_path = os.environ.get(ENV_CONFIG_FILE)
        if config_path:
            if not os.path.exists(config_path):
                raise ConfigurationError(f"{ENV_CONFIG_FILE} points to missing file {config_path}")
            logger.debug("Loading solver config from %s", config_path)
            return SolverConfig.from_yaml(config_path)

        found = shutil.which("minizinc")
        if found:
            logger.debug("Using minizinc found on PATH: %s", found)
        return SolverConfig(executable=found)
