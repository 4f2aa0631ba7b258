"""Fully-qualified name splitting and ordering."""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["SEPARATOR", "FullName", "split_name"]

SEPARATOR = "."


def split_name(full_name: str) -> tuple[str, str]:
    """Split ``full_name`` into (package, class) at the last separator.

    A name without a separator has an empty package part. Never raises.
    """
    pos = full_name.rfind(SEPARATOR)
    if pos == -1:
        return "", full_name
    return full_name[:pos], full_name[pos + 1 :]


@dataclass(frozen=True)
class FullName:
    """A ``package.ClassName`` view that orders by class name alone.

    Ordering looks only at ``class_name``, so ``sorted()`` over FullName
    values is a stable sort by class name that keeps input order for ties.
    """

    package_name: str
    class_name: str

    @classmethod
    def parse(cls, full_name: str) -> FullName:
        package_name, class_name = split_name(full_name)
        return cls(package_name=package_name, class_name=class_name)

    @staticmethod
    def compare(a: FullName, b: FullName) -> int:
        """Three-way comparison on class names: -1, 0 or 1."""
        if a.class_name < b.class_name:
            return -1
        if a.class_name > b.class_name:
            return 1
        return 0

    def sort_key(self) -> str:
        return self.class_name

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, FullName):
            return NotImplemented
        return self.class_name < other.class_name

    def __str__(self) -> str:
        if self.package_name:
            return f"{self.package_name}{SEPARATOR}{self.class_name}"
        return self.class_name
