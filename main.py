from src import BinaryHeap, get_topk, heapsort


priorities = [10.5, 3.2, 15.0, 7.8, 20.1, 1.5]
tasks = ["low", "very_low", "medium", "low_med", "high", "lowest"]
records = [{"task": t, "priority": p} for t, p in zip(tasks, priorities)]

# Min heap over the priority field
print("Creating binary heap...")
heap = BinaryHeap.min_heap(records, key=lambda r: r["priority"])

print(f"Heap size: {heap.size()}")
print(f"Is empty: {heap.empty()}")
print(f"Top: {heap.peek()}")

# Non-destructive read of the first three
print(f"Top 3: {[r['task'] for r in heap.peek_array(3)]}")
print(f"Size after peek_array: {heap.size()}")
print(f"Top 10 (clamped): {len(get_topk(heap, 10))}")

print(f"Drained: {[r['task'] for r in heap.pop_array()]}")
print(f"Heapsort: {heapsort(priorities)}")
