from maxheap.binary_heap.max_heap import MaxHeap
from maxheap.binary_heap.topk import get_topk


def build_heap(values):
    heap = MaxHeap()
    for value in values:
        heap.push(value)
    return heap


class TestGetTopK:
    def test_get_topk_with_negative_k(self):
        heap = build_heap([10, 5, 3])
        assert get_topk(heap, -1) == []
        assert get_topk(heap, 0) == []

    def test_get_topk_with_empty_heap(self):
        heap = MaxHeap()
        result = get_topk(heap, 5)
        assert result == []

    def test_get_topk(self):
        heap = build_heap([10, 5, 15, 1, 20])
        result = get_topk(heap, 3)
        assert result == [20, 15, 10]

    def test_get_topk_larger_than_heap(self):
        heap = build_heap([2, 9, 4])
        assert get_topk(heap, 10) == [9, 4, 2]

    def test_get_topk_with_duplicates(self):
        heap = build_heap([10, 10, 5, 15])
        result = get_topk(heap, 3)
        assert result == [15, 10, 10]

    def test_get_topk_with_negative_values(self):
        heap = build_heap([-10, 0, 5, -5])
        result = get_topk(heap, 2)
        assert result == [5, 0]

    def test_get_topk_leaves_heap_untouched(self):
        heap = build_heap([30, 20, 15, 50, 10, 5])
        before = list(heap)

        get_topk(heap, 4)

        assert list(heap) == before
        assert len(heap) == 6
        assert heap.pop() == 50
