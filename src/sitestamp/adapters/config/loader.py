"""Layered configuration loading with caching and profile support.

Reads the ``[stamp]``, ``[build]`` and ``[lib_log_rich]`` sections through
``lib_layered_config`` so a site can pin its domain or build tool in a user
config file, a ``.env`` file, or ``SITESTAMP___SECTION__KEY`` environment
variables instead of editing the shipped defaults.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Protocol, cast

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from sitestamp import __init__conf__


class ConfigLoaderProtocol(Protocol):
    """Callable config loader that also exposes ``cache_clear``."""

    def __call__(self, *, profile: str | None = None, start_dir: str | None = None) -> Config: ...
    def cache_clear(self) -> None: ...


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Reject profile names that are unsafe to splice into config paths.

    Delegates to ``lib_layered_config.validate_profile_name`` (length limit,
    allowed characters, reserved names, path traversal).

    Raises:
        ValueError: If the profile name is invalid. lib_layered_config raises
            its own ``ValueError`` subclass, so callers catch ``ValueError``.

    Examples:
        >>> validate_profile("staging")

        >>> try:
        ...     validate_profile("../../etc")
        ... except ValueError:
        ...     print("rejected")
        rejected
    """
    validate_profile_name(profile, max_length=max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the ``defaultconfig.toml`` shipped next to this module.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
        >>> get_default_config_path().is_file()
        True
    """
    return Path(__file__).parent / "defaultconfig.toml"


# One read per (profile, start_dir) for the lifetime of the CLI process.
@lru_cache(maxsize=4)
def _read_layers(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


def _get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load configuration merged across all layers.

    Precedence, lowest first: defaults → app → host → user → dotenv → env.
    A profile inserts ``profile/<name>/`` into every file-based layer path.

    Args:
        profile: Optional profile name (``production``, ``preview``...).
        start_dir: Directory that seeds ``.env`` discovery; defaults to cwd.

    Returns:
        Immutable Config with provenance tracking.

    Raises:
        ValueError: If ``profile`` is not a valid profile name.

    Example:
        >>> config = get_config()
        >>> config.get("stamp.file_name")
        'CNAME'
        >>> config.get("missing.key", default="fallback")
        'fallback'
    """
    if profile is not None:
        validate_profile(profile)
    return _read_layers(profile=profile, start_dir=start_dir)


def _cache_clear() -> None:
    """Forget cached Config objects so the next call re-reads every layer."""
    _read_layers.cache_clear()


# lru_cache's cache_clear is invisible once the function is cast to the protocol.
_get_config.cache_clear = _cache_clear  # type: ignore[attr-defined]
get_config: ConfigLoaderProtocol = cast(ConfigLoaderProtocol, _get_config)


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
