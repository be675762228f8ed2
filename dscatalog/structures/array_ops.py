"""Fixed-size array operations.

Insertion and deletion never resize in place: they validate the index and
then build a new list, the way a fixed-length array has to be reallocated.
Update writes in place.
"""

from __future__ import annotations

import logging
from typing import List

from ..constants import NOT_FOUND
from ..error_handling import index_out_of_range

logger = logging.getLogger(__name__)


def insert_at(arr: List[int], index: int, element: int) -> List[int]:
    """
    Insert ``element`` at ``index`` and return a new list one longer.

    ``index`` may equal ``len(arr)`` to append. Anything outside
    ``[0, len(arr)]`` raises IndexOutOfRangeError.
    Time: O(n), Space: O(n)
    """
    if index < 0 or index > len(arr):
        raise index_out_of_range(index, len(arr), inclusive=True)

    new_arr = [0] * (len(arr) + 1)

    # Copy elements before the insertion point
    for i in range(index):
        new_arr[i] = arr[i]

    new_arr[index] = element

    # Copy elements after the insertion point
    for i in range(index, len(arr)):
        new_arr[i + 1] = arr[i]

    return new_arr


def delete_at(arr: List[int], index: int) -> List[int]:
    """
    Remove the element at ``index`` and return a new list one shorter.

    Anything outside ``[0, len(arr))`` raises IndexOutOfRangeError.
    Time: O(n), Space: O(n)
    """
    if index < 0 or index >= len(arr):
        raise index_out_of_range(index, len(arr))

    new_arr = [0] * (len(arr) - 1)

    for i in range(index):
        new_arr[i] = arr[i]

    # Shift the tail left over the removed slot
    for i in range(index + 1, len(arr)):
        new_arr[i - 1] = arr[i]

    return new_arr


def search(arr: List[int], target: int) -> int:
    """
    Linear search through array.
    Returns index of the first match or NOT_FOUND (-1).
    Time: O(n), Space: O(1)
    """
    for i, value in enumerate(arr):
        if value == target:
            return i
    return NOT_FOUND


def update(arr: List[int], index: int, new_value: int) -> bool:
    """
    Overwrite ``arr[index]`` in place.

    Unlike insert_at/delete_at this never raises: an out-of-range index
    leaves the list untouched and returns False.
    Time: O(1), Space: O(1)
    """
    if index < 0 or index >= len(arr):
        logger.debug("update skipped: index %d outside [0, %d)", index, len(arr))
        return False
    arr[index] = new_value
    return True
