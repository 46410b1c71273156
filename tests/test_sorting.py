from hypothesis import given
from hypothesis import strategies as st

from algokit.sorting import heap_sort, heapify

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=60)


@given(int_lists)
def test_heap_sort_matches_sorted(values):
    assert heap_sort(values) == sorted(values)


@given(int_lists)
def test_heap_sort_leaves_input_untouched(values):
    original = list(values)
    heap_sort(values)
    assert values == original


@given(int_lists)
def test_heapify_builds_max_heap(values):
    heap = list(values)
    for root in reversed(range(len(heap) // 2)):
        heapify(heap, len(heap), root)
    assert sorted(heap) == sorted(values)
    for child in range(1, len(heap)):
        assert heap[(child - 1) // 2] >= heap[child]


@given(int_lists, int_lists)
def test_heapify_ignores_items_past_size(head, tail):
    heap = list(head)
    for root in reversed(range(len(heap) // 2)):
        heapify(heap, len(heap), root)
    combined = heap + tail
    heapify(combined, len(heap), 0)
    assert combined[len(heap):] == tail
    assert combined[:len(heap)] == heap