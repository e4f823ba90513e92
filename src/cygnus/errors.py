"""Errors shared by every builder in Cygnus."""

from collections.abc import Iterable


class MissingFieldError(Exception):
    """Raised when a builder is asked to build without its required fields.

    Builders collect every missing field before raising, so a single error
    names all of them.
    """

    def __init__(self, fields: Iterable[str], entity: str | None = None) -> None:
        self.fields = list(fields)
        self.entity = entity
        names = ", ".join(f"`{name}`" for name in self.fields)
        prefix = f"Unable to build {entity}: " if entity else ""
        super().__init__(f"{prefix}missing field(s): {names}")
