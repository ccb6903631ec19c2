import torch.distributed as dist


def print0(*args, **kwargs):
    if not dist.is_available() or not dist.is_initialized() or dist.get_rank() == 0:
        print(*args, **kwargs)


def ceil_div(numerator: int, denominator: int) -> int:
    """Integer ceiling of numerator / denominator, without going through float."""
    if denominator <= 0:
        raise ValueError(f"denominator must be greater than 0, got {denominator}")
    return -(-numerator // denominator)
