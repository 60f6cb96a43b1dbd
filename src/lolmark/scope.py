"""Nested variable bindings for lolmark.

A Scope is a stack of name -> value frames. The parser pushes a frame when
it enters a paragraph and pops it on exit, so a variable defined inside a
paragraph is invisible after the paragraph and in its siblings.

Usage:
    scope = Scope()              # Initializes with the global frame
    scope.define("X", "hi")      # Writes the innermost frame
    with scope.frame():          # Paragraph-sized frame
        scope.define("X", "yo")  # Shadows the outer X
        scope.resolve("X")       # 'yo'
    scope.resolve("X")           # 'hi'

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

from lolmark.errors import ScopeError


@dataclass
class Scope:
    """Stack of variable frames.

    Invariant: stack[0] is always the global frame and is never popped;
    stack[-1] is the innermost frame and receives every definition.

    """

    _stack: list[dict[str, str]] = field(default_factory=list)

    def __post_init__(self) -> None:
        """Initialize with the global frame."""
        self._stack = [{}]

    def push(self) -> None:
        """Open a new innermost frame."""
        self._stack.append({})

    def pop(self) -> dict[str, str]:
        """Close the innermost frame.

        Returns:
            The bindings that went out of scope

        Raises:
            ScopeError: If attempting to pop the global frame
        """
        if len(self._stack) <= 1:
            raise ScopeError("Cannot pop global scope frame")
        return self._stack.pop()

    @contextmanager
    def frame(self) -> Iterator[dict[str, str]]:
        """Push a frame for the duration of a ``with`` block."""
        self.push()
        try:
            yield self._stack[-1]
        finally:
            self.pop()

    def define(self, name: str, value: str) -> None:
        """Bind ``name`` in the innermost frame, replacing any earlier value there."""
        self._stack[-1][name] = value

    def resolve(self, name: str) -> str | None:
        """Find the nearest binding for ``name``.

        Walks from innermost to outermost frame.

        Returns:
            The bound value, or None if no frame defines the name
        """
        for bindings in reversed(self._stack):
            if name in bindings:
                return bindings[name]
        return None

    def depth(self) -> int:
        """Current nesting depth (global = 0)."""
        return len(self._stack) - 1

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.resolve(name) is not None
