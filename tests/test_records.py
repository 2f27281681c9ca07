import pytest

from algokit.records import (
    ComplexPair,
    EmployeeRegistry,
    Shop,
    ones_complement,
    sum_imag,
    sum_real,
)


def test_complex_addition():
    assert ComplexPair(3, 4) + ComplexPair(5, 8) == ComplexPair(8, 12)


def test_complex_describe():
    assert ComplexPair(3, 4).describe() == "Your complex number is 3i + 4"


def test_sum_parts_match_addition():
    a, b = ComplexPair(3, 4), ComplexPair(5, 8)
    total = a + b
    assert sum_real(a, b) == total.real
    assert sum_imag(a, b) == total.imag


def test_add_with_other_type():
    with pytest.raises(TypeError):
        ComplexPair(1, 2) + 3


def test_shop_describe():
    shop = Shop()
    shop.add_item(1, 50)
    shop.add_item(2, 75)
    assert shop.describe() == [
        "The price of item with Id 1 is 50",
        "The price of item with Id 2 is 75",
    ]


def test_shop_capacity():
    shop = Shop()
    for i in range(Shop.CAPACITY):
        shop.add_item(i, i)
    with pytest.raises(ValueError):
        shop.add_item(999, 1)
    assert len(shop.describe()) == Shop.CAPACITY


def test_registry_counts_from_start():
    registry = EmployeeRegistry()
    assert registry.register(7) == 1001
    assert registry.register(8) == 1002
    assert registry.describe(7) == "The id of the employee is 7and this is Employee no: 1001"


def test_registry_custom_start():
    registry = EmployeeRegistry(start=0)
    assert registry.register(5) == 1


def test_registry_unknown():
    with pytest.raises(KeyError):
        EmployeeRegistry().describe(1)


def test_ones_complement():
    assert ones_complement("1010") == "0101"
    assert ones_complement(ones_complement("110")) == "110"


def test_ones_complement_invalid():
    with pytest.raises(ValueError):
        ones_complement("102")