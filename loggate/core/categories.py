"""Logger categories with fixed names."""

from __future__ import annotations

from typing import ClassVar


class LoggerCategory:
    """Base for logger categories; subclasses declare ``name``."""

    name: ClassVar[str] = "loggate"

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if "name" not in cls.__dict__:
            cls.name = f"loggate.{cls.__name__}"

    def __str__(self) -> str:
        return self.name


class Infrastructure(LoggerCategory):
    name = "loggate.Infrastructure"


class Model(LoggerCategory):
    name = "loggate.Model"


class Query(LoggerCategory):
    name = "loggate.Query"


class Database(LoggerCategory):
    name = "loggate.Database"


class Update(LoggerCategory):
    name = "loggate.Update"


def category_name(category: type[LoggerCategory] | LoggerCategory) -> str:
    """Return the fixed name of ``category``."""
    return category.name
