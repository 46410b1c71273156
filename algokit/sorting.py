"""In-place max-heap maintenance and heap sort."""


def heapify(items, size, root):
    """Sift ``items[root]`` down within the first ``size`` elements to restore the max-heap order."""
    while True:
        largest = root
        left, right = 2 * root + 1, 2 * root + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == root:
            return
        items[root], items[largest] = items[largest], items[root]
        root = largest


def heap_sort(items):
    """Return a new list with the elements of ``items`` in ascending order."""
    result = list(items)
    size = len(result)
    for root in reversed(range(size // 2)):
        heapify(result, size, root)
    for end in reversed(range(size)):
        result[0], result[end] = result[end], result[0]
        heapify(result, end, 0)
    return result