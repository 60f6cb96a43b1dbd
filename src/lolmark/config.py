"""ContextVar-based compile configuration for lolmark.

Provides context-local configuration using Python's ContextVars (PEP 567).
Config is set once per Compiler call and read by the parser and the
document builder it owns.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so concurrent compilations never see each other's settings.

Usage:
    # Via the Compiler class
    compiler = Compiler(config=CompileConfig(strict_trailing=True))
    html = compiler("#HAI #KTHXBYE")

    # Direct parser usage
    from lolmark.config import compile_config_context, CompileConfig

    with compile_config_context(CompileConfig(fragment_separator="")):
        html = Parser(source).parse()

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CompileConfig:
    """Immutable compile configuration.

    Attributes:
        word_per_line: Emit free text outside paragraphs one word per fragment
        fragment_separator: String placed between fragments of the final document
        tolerate_stray_mkay: Silently consume a ``#MKAY`` with nothing to close
        strict_trailing: Reject any token after ``#KTHXBYE``

    """

    word_per_line: bool = True
    fragment_separator: str = "\n"
    tolerate_stray_mkay: bool = True
    strict_trailing: bool = False

    @classmethod
    def from_dict(cls, config_dict: dict) -> "CompileConfig":
        """Create CompileConfig from dictionary.

        Only includes keys that are valid CompileConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> config = CompileConfig.from_dict({
            ...     "strict_trailing": True,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.strict_trailing
            True

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: CompileConfig = CompileConfig()

_compile_config: ContextVar[CompileConfig] = ContextVar(
    "compile_config",
    default=_DEFAULT_CONFIG,
)


def get_compile_config() -> CompileConfig:
    """Get current compile configuration (context-local)."""
    return _compile_config.get()


def set_compile_config(config: CompileConfig) -> None:
    """Set compile configuration for current context.

    Args:
        config: CompileConfig instance to use for this context.

    """
    _compile_config.set(config)


def reset_compile_config() -> None:
    """Reset to the module-level default configuration."""
    _compile_config.set(_DEFAULT_CONFIG)


@contextmanager
def compile_config_context(config: CompileConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with compile_config_context(CompileConfig(word_per_line=False)):
        ...     html = to_html("#HAI red blue #KTHXBYE")
        >>> # Previous config is active again

    """
    previous = _compile_config.get()
    _compile_config.set(config)
    try:
        yield
    finally:
        _compile_config.set(previous)


__all__ = [
    "CompileConfig",
    "get_compile_config",
    "set_compile_config",
    "reset_compile_config",
    "compile_config_context",
]
