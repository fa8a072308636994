from typing import Any, Tuple

SEPARATOR = "."


class SemanticPointer:
    """
    A dotted message address, built by attribute access or `/`.

        L.append.entry_exists        -> "append.entry_exists"
        L.cli.level / "warning"      -> "cli.level.warning"

    Pointers are immutable and compare equal to their dotted string, so they
    can be used directly as catalog keys.
    """

    __slots__ = ("_parts",)

    def __init__(self, path: str = ""):
        parts = tuple(p for p in path.split(SEPARATOR) if p) if path else ()
        object.__setattr__(self, "_parts", parts)

    @classmethod
    def _from_parts(cls, parts: Tuple[str, ...]) -> "SemanticPointer":
        pointer = cls()
        object.__setattr__(pointer, "_parts", parts)
        return pointer

    def __getattr__(self, name: str) -> "SemanticPointer":
        if name.startswith("__"):
            raise AttributeError(name)
        return self._from_parts(self._parts + (name,))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("SemanticPointer is immutable")

    def __truediv__(self, segment: Any) -> "SemanticPointer":
        extra = tuple(p for p in str(segment).split(SEPARATOR) if p)
        return self._from_parts(self._parts + extra)

    @property
    def parts(self) -> Tuple[str, ...]:
        return self._parts

    @property
    def parent(self) -> "SemanticPointer":
        return self._from_parts(self._parts[:-1])

    def __str__(self) -> str:
        return SEPARATOR.join(self._parts)

    def __repr__(self) -> str:
        return f"<SemanticPointer: '{self}'>"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, SemanticPointer):
            return self._parts == other._parts
        return str(other) == str(self)

    def __hash__(self) -> int:
        return hash(str(self))


# Root anchor for all message addresses.
L = SemanticPointer()
