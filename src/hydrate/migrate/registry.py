# SPDX-License-Identifier: MIT

import importlib
import pkgutil
from copy import deepcopy
from typing import Any, Callable, ParamSpec, TypeVar

MIGRATIONS: dict[int, Callable[..., Any]] = {}


T = TypeVar("T")
P = ParamSpec("P")


def migration(version: int) -> Callable[[Callable[P, T]], Callable[P, T]]:
    def wrapper(func: Callable[P, T]) -> Callable[P, T]:
        MIGRATIONS[version] = func
        return func

    return wrapper


def __import_all_modules(package_name: str) -> None:
    package = importlib.import_module(package_name)

    for _, modname, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package_name}.{modname}")


def register_migrations() -> None:
    __import_all_modules("hydrate.migrate.migrations")


def get_migrations() -> dict[int, Callable[[], None]]:
    return deepcopy(MIGRATIONS)
