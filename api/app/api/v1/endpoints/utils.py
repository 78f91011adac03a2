"""
Utility functions for endpoint operations.
"""
import time
from typing import List, Optional


def elapsed_ms(start_time: float) -> float:
    """
    Milliseconds elapsed since start_time, rounded to two decimals.

    Args:
        start_time: Value previously taken from time.perf_counter()

    Returns:
        Elapsed time in milliseconds
    """
    return round((time.perf_counter() - start_time) * 1000, 2)


def merge_tag_params(*tag_lists: Optional[List[str]]) -> Optional[List[str]]:
    """
    Combine the tag values sent as ?tags=... and ?tags[]=...

    Returns:
        All tags in request order, or None when neither form was used
    """
    merged = [tag for tags in tag_lists if tags for tag in tags]
    return merged or None
