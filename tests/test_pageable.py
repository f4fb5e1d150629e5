import pytest

from pico_data_commons import DefaultPageable, InvalidArgumentError, Orders, Pageable


@pytest.mark.parametrize("page_number,page_size", [(0, 1), (0, 10), (3, 25), (7, 1), (2**31, 2**31)])
def test_offset(page_number, page_size):
    pageable = DefaultPageable.of(page_number, page_size)
    assert pageable.offset == page_number * page_size


def test_offset_does_not_overflow_32_bits():
    pageable = DefaultPageable.of(100_000, 100_000)
    assert pageable.offset == 10_000_000_000


def test_rejects_negative_page_number():
    with pytest.raises(InvalidArgumentError, match="Page number must not be less than zero"):
        DefaultPageable.of(-1, 10)


def test_rejects_page_size_below_one():
    with pytest.raises(InvalidArgumentError, match="Page size must not be less than one"):
        DefaultPageable.of(0, 0)


def test_constructor_validates_too():
    with pytest.raises(InvalidArgumentError):
        DefaultPageable(page_number=-5, page_size=10)


@pytest.mark.parametrize("page_number,page_size", [("1", 10), (1, 2.5), (True, 10)])
def test_rejects_non_integers(page_number, page_size):
    with pytest.raises(InvalidArgumentError):
        DefaultPageable.of(page_number, page_size)


def test_rejects_orders_of_wrong_type():
    with pytest.raises(InvalidArgumentError):
        DefaultPageable.of(0, 10, ["name"])


def test_orders_are_optional():
    assert DefaultPageable.of(0, 10).orders is None
    assert not DefaultPageable.of(0, 10).is_sorted
    sorted_request = DefaultPageable.of(0, 10, Orders.asc("name"))
    assert sorted_request.orders == Orders.asc("name")
    assert sorted_request.is_sorted


def test_satisfies_pageable_contract():
    assert isinstance(DefaultPageable.of(0, 10), Pageable)


def test_equality_and_hash():
    a = DefaultPageable.of(1, 10, Orders.asc("name"))
    b = DefaultPageable.of(1, 10, Orders.asc("name"))
    assert a == b
    assert hash(a) == hash(b)
    assert a != DefaultPageable.of(2, 10, Orders.asc("name"))
    assert a != DefaultPageable.of(1, 20, Orders.asc("name"))
    assert a != DefaultPageable.of(1, 10, Orders.desc("name"))
    assert a != DefaultPageable.of(1, 10)


def test_frozen():
    pageable = DefaultPageable.of(0, 10)
    with pytest.raises(AttributeError):
        pageable.page_number = 2  # type: ignore[misc]


def test_navigation():
    orders = Orders.desc("id")
    pageable = DefaultPageable.of(2, 10, orders)
    assert pageable.next() == DefaultPageable.of(3, 10, orders)
    assert pageable.previous() == DefaultPageable.of(1, 10, orders)
    assert pageable.first() == DefaultPageable.of(0, 10, orders)
    assert pageable.with_page(5).page_number == 5
    assert pageable.with_orders(None).orders is None


def test_previous_of_first_page():
    first = DefaultPageable.of(0, 10)
    assert not first.has_previous
    assert first.previous_or_first() is first
    with pytest.raises(InvalidArgumentError):
        first.previous()


def test_str():
    assert str(DefaultPageable.of(0, 10)) == "{page_number: 0, page_size: 10, orders: None}"
