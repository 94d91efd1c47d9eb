"""Container configuration.

ContainerConfig is a frozen dataclass. Immutable after creation, no
string-key dict lookups.
"""

import logging
from dataclasses import dataclass

from nestbox.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ContainerConfig:
    """Container configuration. Immutable after creation.

    All fields have defaults. Override what you need::

        config = ContainerConfig(name="billing", warn_on_action_override=False)
    """

    # Label used in log lines
    name: str = "app"

    # Log a warning when a module replaces an action registered earlier.
    # The later module still wins.
    warn_on_action_override: bool = True

    # Applied by nestbox.configure_logging(); never applied on import
    log_level: str = "info"


def configure_logging(config: ContainerConfig) -> None:
    """Set the level of the ``nestbox`` logger from *config*.

    Handlers are left to the embedding application.

    Raises:
        ConfigurationError: ``config.log_level`` is not a known level name.
    """
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        msg = f"Unknown log level: {config.log_level!r}"
        raise ConfigurationError(msg)
    logging.getLogger("nestbox").setLevel(level)
