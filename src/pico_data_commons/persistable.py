from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Persistable(Protocol):
    """Capability of an entity that a persistence layer can save.

    ``id`` is the identifier; ``is_new()`` tells whether the entity has not
    been stored yet.
    """

    id: Any

    def is_new(self) -> bool: ...
