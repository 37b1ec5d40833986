# utils/chunking.py

from typing import List, Tuple


def distribute_work(total_items: int, num_processes: int) -> List[Tuple[int, int]]:
    """Divide ``total_items`` into contiguous (start, end) ranges, one per process."""
    if num_processes < 1:
        raise ValueError(f"Number of processes must be >= 1, got {num_processes}")

    batch_size = total_items // num_processes
    remainder = total_items % num_processes

    distribution = []
    for i in range(num_processes):
        start = i * batch_size + min(i, remainder)
        end = min((i + 1) * batch_size + min(i + 1, remainder), total_items)
        if end > start:
            distribution.append((start, end))

    return distribution
