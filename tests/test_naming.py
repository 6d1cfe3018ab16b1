"""Tests for frock.naming — path to class-name transforms."""

from frock.naming import (
    capitalize_last_segment,
    class_name_for,
    join_namespace,
    path_to_namespace,
)


class TestPathToNamespace:
    def test_single_segment(self) -> None:
        assert path_to_namespace("hello") == "hello"

    def test_every_slash_replaced(self) -> None:
        assert path_to_namespace("admin/user/list") == "admin\\user\\list"

    def test_custom_separator(self) -> None:
        assert path_to_namespace("user/list", ".") == "user.list"

    def test_empty(self) -> None:
        assert path_to_namespace("") == ""


class TestCapitalizeLastSegment:
    def test_only_last_segment(self) -> None:
        assert capitalize_last_segment("App\\controller\\user\\list") == "App\\controller\\user\\List"

    def test_no_separator(self) -> None:
        assert capitalize_last_segment("hello") == "Hello"

    def test_already_capitalized(self) -> None:
        assert capitalize_last_segment("App\\Hello") == "App\\Hello"

    def test_rest_of_segment_untouched(self) -> None:
        assert capitalize_last_segment("App\\userList") == "App\\UserList"

    def test_trailing_separator(self) -> None:
        assert capitalize_last_segment("App\\user\\") == "App\\user\\"

    def test_empty(self) -> None:
        assert capitalize_last_segment("") == ""

    def test_multichar_separator(self) -> None:
        assert capitalize_last_segment("app::user::list", "::") == "app::user::List"


class TestJoinNamespace:
    def test_skips_empty_parts(self) -> None:
        assert join_namespace("", "user\\list") == "user\\list"

    def test_joins(self) -> None:
        assert join_namespace("App", "controller", "hello") == "App\\controller\\hello"

    def test_all_empty(self) -> None:
        assert join_namespace("", "") == ""


class TestClassNameFor:
    def test_controller_example(self) -> None:
        assert class_name_for("App\\controller", "user/list") == "App\\controller\\user\\List"

    def test_empty_prefix(self) -> None:
        assert class_name_for("", "hello") == "Hello"

    def test_dotted(self) -> None:
        assert class_name_for("app.views", "blog/post", ".") == "app.views.blog.Post"

    def test_empty_path_keeps_prefix_intact(self) -> None:
        assert class_name_for("App\\controller", "") == "App\\controller\\"

    def test_empty_prefix_and_path(self) -> None:
        assert class_name_for("", "") == ""
