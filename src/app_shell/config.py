import logging
import os

from src.rules.models import OpsRules

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class ConfigError(Exception):
    """Raised when operational requirements are not met at startup."""


def validate_ops_rules(ops: OpsRules) -> None:
    """
    Validate operational requirements before startup.
    """
    missing = [env_var for env_var in ops.required_env if env_var not in os.environ]
    if missing:
        raise ConfigError(
            f"Missing required environment variables: {', '.join(missing)}"
        )

    if not isinstance(logging.getLevelName(ops.log_level.upper()), int):
        raise ConfigError(f"Unknown log level: {ops.log_level}")


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
