import logging
from itertools import islice
from operator import lt
from typing import Any, Callable, Iterable

from binheap.binary_heap.binary_heap import BinaryHeap

logger = logging.getLogger(__name__)


def get_topk(heap: BinaryHeap, k: int) -> list[Any]:
    """
    Function to extract the top-K elements from a heap.

    In case of a max heap, the top K elements with the highest priority will
    be retrieved; for a min heap the top K elements with the lowest priority
    will be retrieved. The elements are removed from the heap.

    Parameters
    ----------
    heap : BinaryHeap
        A BinaryHeap object, consumed by up to ``k`` extractions.
    k : int
        The number of 'top-K' elements to retrieve.

    Returns
    -------
    list[Any]
        The 'top-K' elements, in extraction order.
    """
    if k <= 0:
        return []
    if heap.is_empty():
        return []

    if k > len(heap):
        logger.debug("k=%d exceeds heap size %d, draining heap", k, len(heap))
    return list(islice(heap, k))


def heap_sort(
    values: Iterable[Any],
    comparator: Callable[[Any, Any], bool] = lt
) -> list[Any]:
    """
    Sort values by pushing them through a BinaryHeap.

    Parameters
    ----------
    values : Iterable[Any]
        The values to sort.
    comparator : Callable[[Any, Any], bool]
        The "higher priority" predicate, by default ``operator.lt``
        (ascending order).

    Returns
    -------
    list[Any]
        A new list in extraction order. Equal elements keep no particular
        relative order.
    """
    heap = BinaryHeap(comparator)
    heap.extend(values)
    logger.debug("sorting %d values", len(heap))
    return list(heap)
