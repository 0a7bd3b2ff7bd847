from enum import Enum
from typing import Any, Protocol, final, override


class AccessMode(Enum):
    READ_WRITE = "rw"
    READ_ONLY = "ro"


class ReadOnlyError(TypeError):
    """Raised when writing through a reference that was handed out read-only."""


class Ref[T](Protocol):
    @property
    def readonly(self) -> bool: ...
    def get(self) -> T: ...
    def set(self, value: T) -> None: ...


@final
class ItemRef[T]:
    """
    A reference to `container[index]`.

    The container is borrowed, not copied: every `get` re-reads it and every
    `set` writes straight into it, so the container must outlive the ref.
    """

    __slots__ = ("container", "index", "mode")

    def __init__(self, container: Any, index: int, mode: AccessMode = AccessMode.READ_WRITE):
        self.container = container
        self.index = index
        self.mode = mode

    @property
    def readonly(self) -> bool:
        return self.mode is AccessMode.READ_ONLY

    def get(self) -> T:
        return self.container[self.index]

    def set(self, value: T) -> None:
        if self.readonly:
            raise ReadOnlyError(f"element {self.index} was referenced read-only")
        self.container[self.index] = value

    @override
    def __repr__(self) -> str:
        return f"ItemRef(index={self.index}, mode={self.mode.name})"


@final
class ValueRef[T]:
    """A read-only view of a value that has no storage to write back to."""

    __slots__ = ("value",)

    def __init__(self, value: T):
        self.value = value

    @property
    def readonly(self) -> bool:
        return True

    def get(self) -> T:
        return self.value

    def set(self, value: T) -> None:
        raise ReadOnlyError("generated values cannot be assigned to")

    @override
    def __repr__(self) -> str:
        return f"ValueRef({self.value!r})"
