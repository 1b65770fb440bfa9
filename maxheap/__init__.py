from maxheap.binary_heap import EmptyHeapError, MaxHeap, get_topk

__version__ = "0.1.0"
