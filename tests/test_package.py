"""Tests for the top-level frock package — lazy public API."""

import pytest

import frock


class TestLazyImports:
    @pytest.mark.parametrize("name", frock.__all__)
    def test_all_names_resolve(self, name: str) -> None:
        assert getattr(frock, name) is not None

    def test_frock_class(self) -> None:
        from frock.dispatcher import Frock

        assert frock.Frock is Frock

    def test_errors(self) -> None:
        from frock.errors import ClassNotFound

        assert frock.ClassNotFound is ClassNotFound

    def test_unknown_attribute(self) -> None:
        with pytest.raises(AttributeError, match="no attribute 'Nope'"):
            frock.Nope  # noqa: B018
