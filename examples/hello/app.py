"""Hello World — the simplest frock dispatcher.

Demonstrates per-role namespaces, decorator registration, a controller
that delegates to a view, an async entry point, and the class-not-found
error.

Run:
    python app.py user/list
    PYTHONPATH=. frock run app:frock user/list
"""

import sys

import anyio

from frock import ClassNotFound, Frock, FrockConfig

frock = Frock(
    config=FrockConfig(
        namespaces={
            "controller": "Hello\\controller",
            "model": "Hello\\model",
            "view": "Hello\\view",
        },
    ),
)


@frock.register("model", "users")
class Users:
    def all(self) -> list[str]:
        return ["alice", "bob"]


@frock.register("view", "greeting")
class Greeting:
    def execute(self) -> None:
        print("Hello, World!")


@frock.register("controller")
class Hello:
    def execute(self) -> None:
        frock.execute_path("view", "greeting")


@frock.register("controller", "user/list")
class UserList:
    async def execute(self) -> None:
        users = frock.instantiate_class("model", "users")
        print(", ".join(users.all()))


if __name__ == "__main__":
    frock.process_request({"path": sys.argv[1]} if len(sys.argv) > 1 else {})
    try:
        anyio.run(frock.aexecute_path, "controller")
    except ClassNotFound as exc:
        print(exc, file=sys.stderr)
        sys.exit(1)
