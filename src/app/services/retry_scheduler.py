"""Retry backoff for queued export jobs"""
from typing import List


def calculate_backoff(retry_count: int, base_delay: int = 2) -> int:
    """
    Calculate exponential backoff delay in seconds.

    Formula: base_delay * 2 ^ retry_count
    Examples (base 2): retry_count=0 -> 2s, retry_count=1 -> 4s, retry_count=2 -> 8s

    Args:
        retry_count: Retry number (0-indexed)
        base_delay: Delay before the first retry

    Returns:
        int: Delay in seconds
    """
    return base_delay * (2 ** retry_count)


def backoff_intervals(max_attempts: int, base_delay: int = 2) -> List[int]:
    """
    Delays between attempts for a job allowed ``max_attempts`` runs in total.

    Examples: max_attempts=3, base_delay=2 -> [2, 4]
    """
    return [calculate_backoff(retry, base_delay) for retry in range(max(max_attempts - 1, 0))]
