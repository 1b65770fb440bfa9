from maxheap.binary_heap.exceptions import EmptyHeapError
from maxheap.binary_heap.max_heap import MaxHeap
from maxheap.binary_heap.topk import get_topk
