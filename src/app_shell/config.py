import logging
import os
from collections.abc import Mapping

from src.rules.models import Rules

logger = logging.getLogger(__name__)


class ConfigurationError(RuntimeError):
    """Raised when the process cannot start with the current environment."""


def validate_ops_rules(rules: Rules, environ: Mapping[str, str] | None = None) -> None:
    """
    Validate operational requirements before startup.
    """
    environ = os.environ if environ is None else environ

    missing = [name for name in rules.ops.required_env if name not in environ]
    if missing:
        logger.critical("Missing required environment variables: %s", ", ".join(missing))
        raise ConfigurationError(f"Missing required environment variables: {', '.join(missing)}")

    if "CRANE_SECRET_KEY" not in environ:
        logger.warning("CRANE_SECRET_KEY is not set; tokens are signed with the development key")

    logger.info("Configuration validated (rules %s)", rules.project.rules_version)
