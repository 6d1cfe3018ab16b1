"""Tests for the hello example."""

import pytest

from frock import ClassNotFound


class TestHelloApp:
    """Verify every registered path in the hello example dispatches."""

    def test_default_path(self, example_frock, capsys: pytest.CaptureFixture[str]) -> None:
        example_frock.execute_path("controller")
        assert capsys.readouterr().out == "Hello, World!\n"

    @pytest.mark.anyio
    async def test_async_controller(self, example_frock, capsys: pytest.CaptureFixture[str]) -> None:
        example_frock.process_request({"path": "user/list"})
        await example_frock.aexecute_path("controller")
        assert capsys.readouterr().out == "alice, bob\n"

    def test_class_names(self, example_frock) -> None:
        assert example_frock.get_class_name("controller", "user/list") == "Hello\\controller\\user\\List"
        assert example_frock.get_class_name("model", "users") == "Hello\\model\\Users"

    def test_unknown_path(self, example_frock) -> None:
        with pytest.raises(ClassNotFound, match="Hello\\\\controller\\\\Missing"):
            example_frock.execute_path("controller", "missing")
