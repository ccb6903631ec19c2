import operator
from abc import abstractmethod, ABCMeta
from typing import Iterable, TypeVar

from partition_utils.util.helper import ceil_div

T = TypeVar("T")


def chunk_partition(collection: Iterable[T], num_partitions: int) -> list[list[T]]:
    """
    Split a collection into num_partitions contiguous chunks.
    Every chunk holds ceil(len / num_partitions) items except the last
    non-empty one, which may hold fewer. Chunks after the input runs out
    are empty.

    Examples:
        - collection: [1,2,3,4,5,6,7]
        - num_partitions: 3
        - return: [[1,2,3], [4,5,6], [7]]
    """
    items, num_partitions = _validate_inputs(collection, num_partitions)
    partition_size = ceil_div(len(items), num_partitions)
    return [
        items[i * partition_size : (i + 1) * partition_size]
        for i in range(num_partitions)
    ]


def round_robin_partition(
    collection: Iterable[T], num_partitions: int
) -> list[list[T]]:
    """
    Split a collection into num_partitions by assigning the i-th item to
    partition i % num_partitions.

    Examples:
        - collection: [1,2,3,4,5,6,7]
        - num_partitions: 3
        - return: [[1,4,7], [2,5], [3,6]]
    """
    items, num_partitions = _validate_inputs(collection, num_partitions)
    return [items[rank::num_partitions] for rank in range(num_partitions)]


def _validate_inputs(collection, num_partitions) -> tuple[list, int]:
    # bool is an int subclass, but True is not a partition count.
    count = None
    if not isinstance(num_partitions, bool):
        try:
            count = operator.index(num_partitions)
        except TypeError:
            pass
    if count is None or count <= 0:
        raise ValueError(
            f"The number of partitions must be greater than 0, got {num_partitions!r}."
        )
    if collection is None:
        raise ValueError("The collection cannot be None.")
    return list(collection), count


class Partitioner(metaclass=ABCMeta):
    @abstractmethod
    def partition(self, world_size: int, indices: Iterable[T]) -> list[list[T]]:
        """Partitions indices into world_size disjoint partitions."""
        pass


class ChunkPartitioner(Partitioner):
    def partition(self, world_size, indices):
        return chunk_partition(indices, world_size)


class RoundRobinPartitioner(Partitioner):
    def partition(self, world_size, indices):
        return round_robin_partition(indices, world_size)


_PARTITIONERS = {
    "chunk": ChunkPartitioner,
    "seq": ChunkPartitioner,
    "round_robin": RoundRobinPartitioner,
    "round-robin": RoundRobinPartitioner,
    "rr": RoundRobinPartitioner,
    "step": RoundRobinPartitioner,
}


def get_partitioner(name: str) -> Partitioner:
    """Return the partitioner registered under the given strategy name."""
    try:
        return _PARTITIONERS[name.lower()]()
    except (KeyError, AttributeError):
        raise ValueError(
            f"Unknown partition strategy {name!r}, "
            f"expected one of {sorted(_PARTITIONERS)}"
        ) from None
