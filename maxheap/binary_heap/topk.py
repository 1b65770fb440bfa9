import numpy as np

from maxheap.binary_heap.max_heap import MaxHeap


def get_topk(heap: MaxHeap, k: int) -> list[int]:
    """
    Function to get the top-K values from a max heap.

    The heap itself is left untouched; the values are read from a copy of its
    storage.

    Parameters
    ----------
    heap : MaxHeap
        A MaxHeap object
    k : int
        The number of 'top-K' values to retrieve.

    Returns
    -------
    list[int]
        The 'top-K' values, largest first. Fewer than `k` values are returned
        when the heap holds fewer than `k`.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    values = np.sort(heap.to_array())[::-1]
    return values[:k].tolist()
