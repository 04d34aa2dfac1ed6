"""ContextVar-based parse configuration for Tejat.

Configuration is read by the lexer and by diagnostic construction from the
current context, so a parse running in one thread never observes settings
made in another.

Usage:
    from tejat.config import ParseConfig, parse_config_context

    with parse_config_context(ParseConfig(detach=True)):
        lines = parse(source)  # records own their text

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

DEFAULT_SNIPPET_LENGTH = 15


@dataclass(frozen=True, slots=True)
class ParseConfig:
    """Immutable parse configuration.

    Note: source_file is per-call state, not configuration. It is passed to
    the Lexer directly.

    Attributes:
        snippet_length: Maximum number of characters of offending text kept
            in a ParseError snippet.
        detach: Return records that own their text instead of borrowing
            spans of the source buffer.

    """

    snippet_length: int = DEFAULT_SNIPPET_LENGTH
    detach: bool = False

    def __post_init__(self) -> None:
        if self.snippet_length < 0:
            msg = f"snippet_length must be >= 0, got {self.snippet_length}"
            raise ValueError(msg)

    @classmethod
    def from_dict(cls, config_dict: dict) -> "ParseConfig":
        """Create ParseConfig from a dictionary.

        Unknown keys are ignored so the same mapping can carry settings for
        the surrounding application.

        Example:
            >>> ParseConfig.from_dict({"detach": True, "theme": "dark"}).detach
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: ParseConfig = ParseConfig()

_parse_config: ContextVar[ParseConfig] = ContextVar(
    "tejat_parse_config",
    default=_DEFAULT_CONFIG,
)


def get_parse_config() -> ParseConfig:
    """Get the parse configuration of the current context."""
    return _parse_config.get()


def set_parse_config(config: ParseConfig) -> None:
    """Set the parse configuration for the current context."""
    _parse_config.set(config)


def reset_parse_config() -> None:
    """Reset the current context to the default configuration."""
    _parse_config.set(_DEFAULT_CONFIG)


@contextmanager
def parse_config_context(config: ParseConfig) -> Iterator[None]:
    """Use ``config`` for the duration of the block.

    The previous configuration is restored even if the block raises.
    """
    previous = _parse_config.get()
    _parse_config.set(config)
    try:
        yield
    finally:
        _parse_config.set(previous)


__all__ = [
    "DEFAULT_SNIPPET_LENGTH",
    "ParseConfig",
    "get_parse_config",
    "parse_config_context",
    "reset_parse_config",
    "set_parse_config",
]
