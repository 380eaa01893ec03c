"""ContextVar-based render configuration for jiramark.

The Jira writer exists in two historical flavours that disagree on a handful
of rules (brace escaping, block quote form, code fence language, math
delimiters, paragraph padding). Each disagreement is an explicit field on
RenderConfig; the defaults select the escaping, multi-line flavour and
``RenderConfig.original()`` selects the other one.

Thread Safety:
    ContextVars are thread-local by design. Each thread (and each asyncio
    task) sees its own configuration, so no locks are needed.

Usage:
    renderer = JiraRenderer()  # Reads the context config at render time

    with render_config_context(RenderConfig(quote_style="line")):
        renderer.render(BlockQuote("  quoted  "))  # 'bq. quoted'

"""

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Literal

from jiramark.errors import ConfigError
from jiramark.utils.logger import get_logger

logger = get_logger(__name__)

QUOTE_STYLES: frozenset[str] = frozenset({"block", "line"})


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Attributes:
        escape_braces: Escape ``{`` in literal text so Jira does not read it
            as the start of a macro
        quote_style: ``"block"`` renders ``{quote}...{quote}``; ``"line"``
            renders a single ``bq.`` line with surrounding whitespace trimmed
        code_language: Emit ``{code:<lang>}`` when the code block carries a
            language class
        math_delimiters: Wrap inline and display math in ``//( ... //)``
        paragraph_newlines: Surround paragraphs with a leading and trailing
            newline

    """

    escape_braces: bool = True
    quote_style: Literal["block", "line"] = "block"
    code_language: bool = True
    math_delimiters: bool = False
    paragraph_newlines: bool = False

    def __post_init__(self) -> None:
        if self.quote_style not in QUOTE_STYLES:
            raise ConfigError(
                "quote_style",
                f"expected one of {sorted(QUOTE_STYLES)}, got {self.quote_style!r}",
            )

    @classmethod
    def original(cls) -> "RenderConfig":
        """Configuration reproducing the plain, non-escaping writer.

        No brace escaping, ``bq.`` quotes, bare ``{code}`` fences and
        newline-padded paragraphs.
        """
        return cls(
            escape_braces=False,
            quote_style="line",
            code_language=False,
            math_delimiters=False,
            paragraph_newlines=True,
        )

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from a dictionary.

        Only keys naming RenderConfig fields are used; unknown keys are
        silently ignored.

        Raises:
            ConfigError: If a known key carries an invalid value.

        Example:
            >>> RenderConfig.from_dict({"quote_style": "line", "other": 1}).quote_style
            'line'

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get the render configuration active in the current context."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set the render configuration for the current context."""
    logger.debug("Installing render config %r", config)
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset the current context to the default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config on exit, even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig.original()):
        ...     get_render_config().escape_braces
        False

    """
    previous = _render_config.get()
    set_render_config(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "QUOTE_STYLES",
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
