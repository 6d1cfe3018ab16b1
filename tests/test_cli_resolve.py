"""Tests for frock.cli._resolve — dispatcher import resolution."""

import sys
import types

import pytest

from frock.cli._resolve import resolve_frock
from frock.dispatcher import Frock


def _broken_factory() -> Frock:
    raise RuntimeError("no config")


@pytest.fixture
def _fake_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with Frock instances on sys.modules."""
    mod = types.ModuleType("_fake_frock_app")
    mod.frock = Frock()  # type: ignore[attr-defined]
    mod.custom = Frock({"path": "custom"})  # type: ignore[attr-defined]
    mod.create = lambda: Frock({"path": "made"})  # type: ignore[attr-defined]
    mod.broken = _broken_factory  # type: ignore[attr-defined]
    mod.not_a_frock = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(sys.modules, "_fake_frock_app", mod)


@pytest.mark.usefixtures("_fake_module")
class TestResolveFrock:
    def test_explicit_attribute(self) -> None:
        assert resolve_frock("_fake_frock_app:custom").get_path() == "custom"

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'frock'."""
        assert isinstance(resolve_frock("_fake_frock_app"), Frock)

    def test_factory(self) -> None:
        assert resolve_frock("_fake_frock_app:create").get_path() == "made"

    def test_factory_error(self) -> None:
        with pytest.raises(TypeError, match="raised an error: no config"):
            resolve_frock("_fake_frock_app:broken")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_frock("nonexistent_module_xyz:frock")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_frock("_fake_frock_app:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match=r"not a frock\.Frock instance"):
            resolve_frock("_fake_frock_app:not_a_frock")
