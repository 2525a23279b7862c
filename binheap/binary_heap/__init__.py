from binheap.binary_heap.binary_heap import BinaryHeap
from binheap.binary_heap.topk import get_topk, heap_sort
