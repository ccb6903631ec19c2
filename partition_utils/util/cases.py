import re

from partition_utils.data.partition import ChunkPartitioner, RoundRobinPartitioner

CASE_PATTERN = r"(pre|asis)_(chunk|rr)_(local|noshuffle)"


class Case:
    def __init__(self, name, pre_shuffle, partitioner, shuffle):
        self.name = name
        self.pre_shuffle = pre_shuffle
        self.partitioner = partitioner
        self.shuffle = shuffle


class CaseFactory:
    @staticmethod
    def create_case(name: str) -> Case:
        """
        Create a case from a name.
        Expect the name to be of the form "(pre|asis)_(chunk|rr)_(local|noshuffle)".
        pre: shuffle all indices once, with a seed shared by every rank.
        chunk/rr: chunk or round-robin partitioning across ranks.
        local: shuffle the rank's own indices on every pass.
        :param name: Name of the case.
        :return: Case object.
        """
        match = re.fullmatch(CASE_PATTERN, name)
        if match is None:
            raise ValueError(
                f"Invalid name '{name}', "
                f"expected name to be of the form '{CASE_PATTERN}'"
            )
        pre_shuffle = match.group(1) == "pre"
        partitioner = (
            RoundRobinPartitioner() if match.group(2) == "rr" else ChunkPartitioner()
        )
        shuffle = match.group(3) == "local"
        return Case(name, pre_shuffle, partitioner, shuffle)
