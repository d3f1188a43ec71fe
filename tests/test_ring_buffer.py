import pytest

from speedwire.ring_buffer import RingBuffer


def test_fill_up_keeps_insertion_order():
    rb = RingBuffer(5)
    for v in [10, 20, 30]:
        rb.add(v)
    assert list(rb) == [10, 20, 30]
    assert len(rb) == 3
    assert rb.oldest() == 10
    assert rb.newest() == 30


def test_wrap_around_replaces_oldest():
    rb = RingBuffer(3)
    for v in range(5):
        rb.add(v)
    assert list(rb) == [2, 3, 4]
    assert len(rb) == rb.capacity() == 3
    assert rb[0] == 2
    assert rb[-1] == 4


def test_write_pointer_wraps_to_zero_when_full():
    rb = RingBuffer(3)
    for v in range(3):
        rb.add(v)
    assert rb.write_pointer() == 0
    rb.add(3)
    assert rb.write_pointer() == 1


def test_index_out_of_range_raises():
    rb = RingBuffer(2)
    assert len(rb) == 0
    with pytest.raises(IndexError):
        rb[0]
    rb.add("a")
    assert rb[0] == "a"
    assert len(rb) == 1
    with pytest.raises(IndexError):
        rb[1]


def test_newest_of_empty_raises():
    with pytest.raises(IndexError):
        RingBuffer(4).newest()


def test_clear_empties_buffer_and_keeps_capacity():
    rb = RingBuffer(4)
    rb.add(1)
    rb.add(2)
    rb.clear()
    assert len(rb) == 0
    assert rb.capacity() == 4
    assert list(rb) == []


def test_set_capacity_clears_and_resizes():
    rb = RingBuffer(2)
    rb.add(1)
    rb.set_capacity(6)
    assert len(rb) == 0
    assert rb.capacity() == 6
    for v in range(6):
        rb.add(v)
    assert list(rb) == list(range(6))


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        RingBuffer(-1)


def test_zero_capacity_holds_single_element():
    rb = RingBuffer(0)
    rb.add("x")
    rb.add("y")
    assert list(rb) == ["y"]


def test_remove_middle_elements_after_wrap():
    rb = RingBuffer(4)
    for v in range(6):
        rb.add(v)
    removed = rb.remove(1, 2)
    assert removed == 2
    assert list(rb) == [2, 5]
    rb.add(6)
    assert list(rb) == [2, 5, 6]


def test_remove_beyond_end_is_ignored():
    rb = RingBuffer(4)
    for v in range(3):
        rb.add(v)
    assert rb.remove(5, 2) == 0
    assert list(rb) == [0, 1, 2]
    assert rb.remove(2, 10) == 1
    assert list(rb) == [0, 1]


def test_remove_all_then_refill():
    rb = RingBuffer(3)
    for v in range(3):
        rb.add(v)
    assert rb.remove(0, 3) == 3
    assert len(rb) == 0
    rb.add(9)
    assert list(rb) == [9]


def test_remove_negative_arguments_rejected():
    rb = RingBuffer(3)
    with pytest.raises(ValueError):
        rb.remove(-1, 1)


@pytest.mark.parametrize("count", [1, 3, 4, 7, 11])
def test_index_mappings_round_trip(count):
    rb = RingBuffer(4)
    for v in range(count):
        rb.add(v)
    for i in range(len(rb)):
        data_index = rb.data_vector_index(i)
        assert rb.ring_buffer_index(data_index) == i


def test_data_vector_index_out_of_range():
    rb = RingBuffer(3)
    rb.add(1)
    with pytest.raises(IndexError):
        rb.data_vector_index(1)
    with pytest.raises(IndexError):
        rb.ring_buffer_index(3)


def test_slice_returns_ordered_list():
    rb = RingBuffer(3)
    for v in range(5):
        rb.add(v)
    assert rb[0:2] == [2, 3]
    assert rb[:] == list(rb)