from maxheap import MaxHeap


values = [30, 20, 15, 50, 10, 5]

print("Creating max heap...")
heap = MaxHeap()
for value in values:
    heap.push(value)

print(f"Max-heap: {heap}")
print(f"Heap size: {len(heap)}")
print(f"Max element: {heap.peek()}")

print(f"Extracted max: {heap.pop()}")
print(f"Heap after extraction: {heap}")
print(f"Is empty: {heap.is_empty()}")
