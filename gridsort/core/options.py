"""
Construction option checks shared by header components.
"""
from typing import Any


class MissingOptionError(TypeError):
    """Exception raised when a required construction input is absent."""
    pass


def require_options(owner: str, **options: Any) -> None:
    """
    Fail fast if any required option is None.

    Args:
        owner: Name of the component being constructed (used in the message)
        **options: Option name -> value

    Raises:
        MissingOptionError: If one or more options are None
    """
    missing = [name for name, value in options.items() if value is None]
    if missing:
        raise MissingOptionError(f"{owner}: missing required option(s): {', '.join(missing)}")
