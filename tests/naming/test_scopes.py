#!/usr/bin/env python3
# pylint: disable=missing-class-docstring,no-self-use
from __future__ import annotations

__package__ = __package__ or "tests.naming"  # pylint:disable=redefined-builtin

import unittest

from jadnames import JADNameProvider, JADNameProviderFactory, NamingContextError, NamingScopes

from tests.common import local_vars, static_method


class TestNamingScopes(unittest.TestCase):
    def test_nested_scope_continues_naming(self):
        scopes = NamingScopes(JADNameProviderFactory())
        outer = static_method(name="outer")
        inner = static_method(name="lambda$outer$0")
        scopes.add_method(outer)
        scopes.add_method(inner, enclosing=outer)

        assert list(scopes.provider(outer).rename(local_vars("int", "int")).values()) == ["i", "j"]
        assert list(scopes.provider(inner).rename(local_vars("int")).values()) == ["k"]

    def test_enclosing_provider_created_on_demand(self):
        scopes = NamingScopes()
        outer = static_method(name="outer")
        inner = static_method(name="inner")
        scopes.add_method(inner, enclosing=outer)

        provider = scopes.provider(inner)
        assert isinstance(provider, JADNameProvider)
        assert list(provider.rename(local_vars("int")).values()) == ["i"]
        # the outer scope does not see what the nested scope did
        assert list(scopes.provider(outer).rename(local_vars("int")).values()) == ["i"]

    def test_providers_are_cached(self):
        scopes = NamingScopes()
        m = static_method()
        assert scopes.provider(m) is scopes.provider(m)
        assert m in scopes
        assert len(scopes) == 1

    def test_factory_options(self):
        scopes = NamingScopes(JADNameProviderFactory(rename_parameters=True))
        assert scopes.provider(static_method()).rename_parameters

    def test_structure(self):
        scopes = NamingScopes()
        outer = static_method(name="outer")
        first = static_method(name="first")
        second = static_method(name="second")
        deepest = static_method(name="deepest")
        scopes.add_method(deepest, enclosing=second)
        scopes.add_method(second, enclosing=outer)
        scopes.add_method(first, enclosing=outer)

        assert scopes.enclosing(deepest) is second
        assert scopes.enclosing(outer) is None
        assert set(scopes.nested(outer)) == {first, second}

        order = list(scopes.methods())
        assert len(order) == 4
        assert order.index(outer) < order.index(second) < order.index(deepest)
        assert order.index(outer) < order.index(first)

    def test_circular_nesting(self):
        scopes = NamingScopes()
        a = static_method(name="a")
        b = static_method(name="b")
        scopes.add_method(b, enclosing=a)
        with self.assertRaises(NamingContextError):
            scopes.add_method(a, enclosing=b)
        with self.assertRaises(NamingContextError):
            scopes.add_method(a, enclosing=a)

    def test_conflicting_enclosing_scope(self):
        scopes = NamingScopes()
        a = static_method(name="a")
        b = static_method(name="b")
        c = static_method(name="c")
        scopes.add_method(c, enclosing=a)
        scopes.add_method(c, enclosing=a)
        with self.assertRaises(NamingContextError):
            scopes.add_method(c, enclosing=b)


    def test_nesting_a_method_that_is_already_named(self):
        scopes = NamingScopes()
        outer = static_method(name="outer")
        inner = static_method(name="inner")
        scopes.provider(inner)
        assert list(scopes.provider(outer).rename(local_vars("int", "int")).values()) == ["i", "j"]

        with self.assertRaises(NamingContextError):
            scopes.add_method(inner, enclosing=outer)
        assert scopes.enclosing(inner) is None


class TestDiscardingScopes(unittest.TestCase):
    def test_discard_releases_provider(self):
        scopes = NamingScopes()
        methods = [static_method(name=f"m{i}") for i in range(100)]
        for m in methods:
            scopes.provider(m).rename(local_vars("int"))
            scopes.discard(m)
        assert len(scopes) == 0
        assert not any(scopes.has_provider(m) for m in methods)

    def test_discard_unknown_method(self):
        scopes = NamingScopes()
        scopes.discard(static_method())
        assert len(scopes) == 0

    def test_nested_provider_created_before_discard(self):
        scopes = NamingScopes()
        outer = static_method(name="outer")
        inner = static_method(name="inner")
        scopes.add_method(inner, enclosing=outer)

        scopes.provider(outer).rename(local_vars("int", "int"))
        inner_provider = scopes.provider(inner)
        scopes.discard(outer)
        assert not scopes.has_provider(outer)
        # the nested scope still needs its place in the graph
        assert outer in scopes

        assert list(inner_provider.rename(local_vars("int")).values()) == ["k"]
        scopes.discard(inner)
        assert len(scopes) == 0

    def test_discard_waits_for_nested_scopes(self):
        scopes = NamingScopes()
        outer = static_method(name="outer")
        inner = static_method(name="inner")
        scopes.add_method(inner, enclosing=outer)

        scopes.provider(outer).rename(local_vars("int", "int"))
        scopes.discard(outer)
        assert scopes.has_provider(outer)

        assert list(scopes.provider(inner).rename(local_vars("int")).values()) == ["k"]
        assert not scopes.has_provider(outer)

    def test_discarded_scope_cannot_be_reused(self):
        scopes = NamingScopes()
        outer = static_method(name="outer")
        first = static_method(name="first")
        late = static_method(name="late")
        scopes.add_method(first, enclosing=outer)
        scopes.provider(first)
        scopes.discard(outer)
        assert not scopes.has_provider(outer)

        with self.assertRaises(NamingContextError):
            scopes.provider(outer)
        with self.assertRaises(NamingContextError):
            scopes.add_method(late, enclosing=outer)


if __name__ == "__main__":
    unittest.main()
