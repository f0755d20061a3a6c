"""ContextVar-based scan configuration for bytelex.

Provides context-local configuration using Python's ContextVars (PEP 567).
Configuration only affects the conveniences around the scanner
(``Scanner.tokenize()`` and token locations); ``Scanner.next_token()``
always returns every token.

Usage:
    from bytelex.config import ScanConfig, scan_config_context

    with scan_config_context(ScanConfig(skip_whitespace=True)):
        tokens = list(Scanner(b"a b").tokenize())

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        skip_whitespace: ``tokenize()`` does not yield WHITESPACE tokens
            (they are still consumed and still advance the cursor)
        source_file: Default file label attached to token locations when
            a Scanner is built without an explicit ``source_file``

    """

    skip_whitespace: bool = False
    source_file: str | None = None

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ScanConfig":
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ScanConfig.from_dict({"skip_whitespace": True, "other": 1})
            ScanConfig(skip_whitespace=True, source_file=None)

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (context-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context."""
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(skip_whitespace=True)):
        ...     get_scan_config().skip_whitespace
        True
        >>> get_scan_config().skip_whitespace
        False

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
