from typing import Optional

import torch
import torch.distributed as dist
from torch.utils.data import Sampler, Dataset

from partition_utils.util.cases import Case


class PartitionSampler(Sampler):
    def __init__(
        self,
        dataset: Dataset,
        case: Case,
        seed: int = 0,
        rank: Optional[int] = None,
        world_size: Optional[int] = None,
    ) -> None:
        self.rank = dist.get_rank() if rank is None else rank
        self.world_size = dist.get_world_size() if world_size is None else world_size
        self.case = case
        self.dataset = dataset

        if self.rank < 0 or self.rank >= self.world_size:
            raise ValueError(
                f"Invalid rank {self.rank}, "
                f"rank should be in the interval [0, {self.world_size - 1}]"
            )

        self.seed = seed + self.rank
        self.epoch = 0
        # Each rank receives different generator seed.
        self.generator = torch.Generator()
        self.generator.manual_seed(self.seed)

        # pre vs. asis
        if self.case.pre_shuffle:
            # Same seed on every rank, so all ranks agree on the pre-shuffle.
            common_generator = torch.Generator()
            common_generator.manual_seed(seed)
            self._pre_indices = torch.randperm(
                len(self.dataset), generator=common_generator
            ).tolist()
        else:
            self._pre_indices = list(range(len(self.dataset)))

        # round-robin vs. chunk partitioning
        self.indices = self.case.partitioner.partition(
            self.world_size, self._pre_indices
        )[self.rank]

    def set_epoch(self, epoch: int) -> None:
        self.epoch = epoch
        self.generator.manual_seed(self.seed + epoch * self.world_size)

    def __iter__(self):
        # local vs. no-shuffle
        if self.case.shuffle:
            permutation = torch.randperm(len(self.indices), generator=self.generator)
            indices = [self.indices[i] for i in permutation.tolist()]
        else:
            indices = self.indices
        return iter(indices)

    def __len__(self):
        return len(self.indices)
