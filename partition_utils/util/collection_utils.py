from typing import Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


def safe_iter(collection: Optional[Iterable[T]]) -> Iterator[T]:
    """Iterate over collection, or over nothing if collection is None."""
    if collection is None:
        return iter(())
    return iter(collection)


def is_not_empty(collection) -> bool:
    return collection is not None and len(collection) > 0
