"""Tests for nested variable scopes."""

import pytest

from lolmark.errors import LolmarkError, ScopeError
from lolmark.scope import Scope


class TestDefineResolve:
    """Definitions land in the innermost frame; lookups walk outward."""

    def test_resolve_global(self) -> None:
        scope = Scope()
        scope.define("X", "hi")
        assert scope.resolve("X") == "hi"

    def test_missing_is_none(self) -> None:
        assert Scope().resolve("nope") is None

    def test_empty_value_is_still_defined(self) -> None:
        scope = Scope()
        scope.define("X", "")
        assert scope.resolve("X") == ""
        assert "X" in scope

    def test_redefine_overwrites(self) -> None:
        scope = Scope()
        scope.define("X", "first")
        scope.define("X", "second")
        assert scope.resolve("X") == "second"

    def test_names_are_case_sensitive(self) -> None:
        scope = Scope()
        scope.define("Name", "v")
        assert scope.resolve("name") is None


class TestNesting:
    """Push/pop frames and shadowing."""

    def test_inner_sees_outer(self) -> None:
        scope = Scope()
        scope.define("X", "outer")
        scope.push()
        assert scope.resolve("X") == "outer"

    def test_inner_shadows_outer(self) -> None:
        scope = Scope()
        scope.define("X", "outer")
        scope.push()
        scope.define("X", "inner")
        assert scope.resolve("X") == "inner"
        scope.pop()
        assert scope.resolve("X") == "outer"

    def test_inner_definition_invisible_after_pop(self) -> None:
        scope = Scope()
        scope.push()
        scope.define("Y", "temp")
        popped = scope.pop()
        assert popped == {"Y": "temp"}
        assert scope.resolve("Y") is None

    def test_sibling_frames_are_isolated(self) -> None:
        scope = Scope()
        with scope.frame():
            scope.define("X", "first paragraph")
        with scope.frame():
            assert scope.resolve("X") is None

    def test_depth(self) -> None:
        scope = Scope()
        assert scope.depth() == 0
        scope.push()
        scope.push()
        assert scope.depth() == 2
        scope.pop()
        assert scope.depth() == 1


class TestGlobalFrameInvariant:
    """The global frame is never popped."""

    def test_pop_global_raises(self) -> None:
        scope = Scope()
        with pytest.raises(ScopeError):
            scope.pop()
        assert scope.depth() == 0

    def test_unbalanced_pop_raises(self) -> None:
        scope = Scope()
        scope.push()
        scope.pop()
        with pytest.raises(ScopeError):
            scope.pop()

    def test_scope_error_is_lolmark_error(self) -> None:
        assert issubclass(ScopeError, LolmarkError)

    def test_frame_pops_on_exception(self) -> None:
        scope = Scope()
        with pytest.raises(RuntimeError):
            with scope.frame():
                scope.define("X", "v")
                raise RuntimeError("boom")
        assert scope.depth() == 0
        assert scope.resolve("X") is None
