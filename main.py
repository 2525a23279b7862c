from binheap import BinaryHeap, get_topk


values = [4, 2, 9, 11]

# Min heap: elements come out in ascending order
print("Creating min heap...")
heap = BinaryHeap.min_heap(values)
print(f"Heap size: {len(heap)}")
print(f"Extracted: {[heap.extract_next() for _ in range(3)]}")
heap.insert(1)
print(f"After inserting 1: {heap.extract_next()}")

# Max heap: elements come out in descending order
print("Creating max heap...")
heap = BinaryHeap.max_heap(values)
print(f"Extracted: {[heap.extract_next() for _ in range(3)]}")
heap.insert(1)
print(f"After inserting 1: {heap.extract_next()}")

# Custom comparator: tasks with the highest priority first
tasks = [(3, "write"), (9, "deploy"), (1, "idle"), (5, "review")]
heap = BinaryHeap(lambda a, b: a[0] > b[0])
heap.extend(tasks)
print(f"Top 2 tasks: {get_topk(heap, 2)}")
print(f"Is empty: {heap.is_empty()}")
