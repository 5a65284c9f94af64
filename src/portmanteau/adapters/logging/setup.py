"""Centralized lib_log_rich initialization for all entry points.

Console scripts, ``python -m portmanteau`` and tests all go through
:func:`init_logging`, which configures the runtime once from the
``[lib_log_rich]`` section and bridges the standard :mod:`logging` module so
``logging.getLogger(__name__)`` records reach lib_log_rich.
"""

from __future__ import annotations

from typing import cast

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from portmanteau import __init__conf__


class LoggingConfigModel(BaseModel):
    """Pydantic model for the ``[lib_log_rich]`` config section.

    Unknown keys are kept and passed straight to ``RuntimeConfig``.

    Example:
        >>> LoggingConfigModel().environment
        'prod'
        >>> LoggingConfigModel(console_level="DEBUG").model_dump(exclude_none=True)
        {'environment': 'prod', 'console_level': 'DEBUG'}
    """

    service: str | None = None
    environment: str = "prod"

    model_config = ConfigDict(extra="allow")


def _build_runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    """Map the ``[lib_log_rich]`` section onto a lib_log_rich RuntimeConfig.

    ``service`` falls back to the package name.
    """
    log_raw: object = config.get("lib_log_rich", default={})
    parsed = LoggingConfigModel.model_validate(cast("dict[str, object]", log_raw) if log_raw else {})
    extra_config = parsed.model_dump(exclude={"service", "environment"}, exclude_none=True)

    return lib_log_rich.runtime.RuntimeConfig(
        service=parsed.service or __init__conf__.name,
        environment=parsed.environment,
        **extra_config,
    )


def init_logging(config: Config) -> None:
    """Initialize the lib_log_rich runtime unless it is already running.

    Loads ``.env`` files first so ``LOG_*`` variables can override the
    configured values.

    Args:
        config: Loaded configuration holding the ``[lib_log_rich]`` section.

    Side Effects:
        Initializes the global lib_log_rich runtime and attaches stdlib
        logging on the first call; later calls return immediately.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_build_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = [
    "LoggingConfigModel",
    "init_logging",
]
