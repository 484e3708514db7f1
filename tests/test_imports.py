"""Tests for verifying import styles work correctly."""

import builtins


class TestFlatImports:
    """Verify flat imports from fx_result work."""

    def test_result_types(self) -> None:
        from fx_result import Err, Ok, Result, err, is_err, is_ok, ok

        result: Result[int, str] = ok(1)
        assert isinstance(result, Ok)
        assert isinstance(err('e'), Err)
        assert is_ok(result)
        assert is_err(err('e'))

    def test_namespace_style(self) -> None:
        """The package module works as the fx namespace."""
        import fx_result as fx

        doubled = fx.map(fx.ok(21), lambda x: x * 2)
        assert fx.unwrap(doubled) == 42
        assert fx.all([fx.ok(1), fx.ok(2)]) == fx.ok([1, 2])
        assert fx.zip(fx.ok(1), fx.ok(2)) == fx.ok((1, 2))

    def test_public_names_resolve(self) -> None:
        import fx_result

        for name in fx_result.__all__:
            assert getattr(fx_result, name) is not None

    def test_builtins_not_shadowed_globally(self) -> None:
        """Importing the package does not touch the real builtins."""
        import fx_result  # noqa: F401

        assert builtins.all([True, True]) is True
        assert builtins.any([False]) is False
        assert builtins.map is map


class TestSubmoduleImports:
    """Verify submodule imports work."""

    def test_submodules(self) -> None:
        from fx_result.combinators import all, any, zip, zip3
        from fx_result.decorators import safe, safe_async, wrap
        from fx_result.errors import UnhandledError, UnwrapError
        from fx_result.result import Err, Ok
        from fx_result.tagged import TaggedError, catch_by_tag, err_tagged
        from fx_result.transform import and_then, map, or_else

        assert callable(all) and callable(any) and callable(zip) and callable(zip3)
        assert callable(wrap) and callable(safe) and callable(safe_async)
        assert issubclass(UnhandledError, Exception)
        assert issubclass(UnwrapError, Exception)
        assert Ok(1) != Err(1)
        assert catch_by_tag(err_tagged('A', 1), 'A', lambda e: Ok(e)) == Ok(1)
        assert TaggedError('A', 1).tag == 'A'
        assert callable(and_then) and callable(map) and callable(or_else)
