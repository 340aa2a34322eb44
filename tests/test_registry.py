"""Tests for the global root registry."""

import pytest

from localeloom.registry import (
    RootRegistry,
    add_global_root,
    clear_global_roots,
    get_global_roots,
    get_root_registry,
    remove_global_root,
)


class TestRootRegistry:
    """Ordering and validation of roots."""

    def test_empty_at_start(self) -> None:
        """A new registry has no roots."""
        assert RootRegistry().roots == ()

    def test_most_recent_first(self) -> None:
        """Adding a root prepends it."""
        registry = RootRegistry()
        registry.add("/a")
        registry.add("/b")
        assert registry.roots == ("/b", "/a")

    def test_add_is_idempotent(self) -> None:
        """Re-adding a root neither duplicates nor reorders it."""
        registry = RootRegistry()
        registry.add("/a")
        registry.add("/b")
        registry.add("/a")
        assert registry.roots == ("/b", "/a")

    @pytest.mark.parametrize("root", [None, "", 42, ["/a"]])
    def test_invalid_roots_ignored(self, root: object) -> None:
        """Invalid values are ignored by add() and remove()."""
        registry = RootRegistry()
        registry.add("/a")
        registry.add(root)
        registry.remove(root)
        assert registry.roots == ("/a",)

    def test_remove(self) -> None:
        """remove() drops a root; unknown roots are a no-op."""
        registry = RootRegistry()
        registry.add("/a")
        registry.add("/b")
        registry.remove("/a")
        registry.remove("/never-added")
        assert registry.roots == ("/b",)

    def test_clear_and_reset(self) -> None:
        """clear() and reset() remove every root."""
        registry = RootRegistry()
        registry.add("/a")
        registry.clear()
        assert len(registry) == 0

        registry.add("/b")
        registry.reset()
        assert "/b" not in registry

    def test_repr(self) -> None:
        """repr lists the roots."""
        registry = RootRegistry()
        registry.add("/a")
        assert repr(registry) == "RootRegistry(roots=('/a',))"


class TestGlobalHelpers:
    """Module-level helpers operate on the process-wide registry."""

    def test_add_and_remove(self) -> None:
        """Helpers mutate the default registry."""
        add_global_root("/x")
        add_global_root("/y")
        assert get_global_roots() == ("/y", "/x")
        assert get_root_registry().roots == ("/y", "/x")

        remove_global_root("/x")
        assert get_global_roots() == ("/y",)

        clear_global_roots()
        assert get_global_roots() == ()
