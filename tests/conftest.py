# topmark:header:start
#
#   project      : Vuenify
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the Vuenify test suite.

This file sets up global fixtures, typed wrappers around pytest decorators,
and the logging configuration for test runs.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs with `make_config(**overrides)` (a frozen `Config`), or use
      `vuenify.config.MutableConfig` when a test exercises merge logic.
    - Do **not** mutate a frozen `Config`; call `Config.thaw()`, edit the
      returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from vuenify.config import MutableConfig, logging
from vuenify.formatting.props import Attribute, Directive, SourceSpan
from vuenify.template.scanner import scan_elements

if TYPE_CHECKING:
    from vuenify.config import Config
    from vuenify.formatting.props import Element, Prop

F = TypeVar("F", bound=Callable[..., object])

# The type of a decorator that returns the function it wraps.
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


def fixture(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.fixture`."""
    return as_typed_mark(pytest.fixture(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_vuenify_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure Vuenify's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE so decisions are captured during test runs.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and keyword overrides.

    Args:
        **overrides (Any): Field overrides applied to the mutable builder.

    Returns:
        Config: An immutable configuration snapshot.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def props_of(markup: str) -> tuple[str, tuple[Prop, ...]]:
    """Scan ``markup`` (one start tag) and return it with the tag's props.

    Args:
        markup (str): Markup whose first element is the one under test.

    Returns:
        tuple[str, tuple[Prop, ...]]: The document and the first element's props.
    """
    elements: list[Element] = scan_elements(markup)
    assert elements, f"no element in {markup!r}"
    return markup, elements[0].props


def attr(
    name: str,
    value: str | None = None,
    *,
    start: int = 0,
    quote: str | None = '"',
) -> Attribute:
    """Build a plain attribute whose source text is derived from its parts."""
    source: str = name if value is None else f"{name}={quote or ''}{value}{quote or ''}"
    return Attribute(
        name=name,
        span=SourceSpan(start, start + len(source)),
        source=source,
        value=value,
        quote=None if value is None else quote,
    )


def directive(
    source: str,
    name: str,
    *,
    argument: str | None = None,
    modifiers: tuple[str, ...] = (),
    expression: str | None = None,
    start: int = 0,
    is_dynamic_argument: bool = False,
) -> Directive:
    """Build a directive prop with an explicit source text."""
    return Directive(
        name=name,
        span=SourceSpan(start, start + len(source)),
        source=source,
        argument=argument,
        is_dynamic_argument=is_dynamic_argument,
        modifiers=modifiers,
        expression=expression,
    )
