"""Default configuration values for EchoListen."""

from .config import EchoListenConfig


def create_default_config(**overrides) -> EchoListenConfig:
    """Create a default configuration with optional overrides.

    Args:
        **overrides: Keyword arguments to override default values

    Returns:
        EchoListenConfig with defaults and overrides applied

    Example:
        config = create_default_config(
            default_slicing_method="DURATION",
            default_rule_value=5,
        )
    """
    return EchoListenConfig(**overrides)
