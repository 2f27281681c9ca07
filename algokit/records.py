"""Small record types: complex pairs, a price list, an employee registry and bit strings."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ComplexPair:
    """A pair of integer parts shown as ``a i + b``."""

    real: int = 0
    imag: int = 0

    def __add__(self, other: "ComplexPair") -> "ComplexPair":
        if not isinstance(other, ComplexPair):
            return NotImplemented
        return ComplexPair(self.real + other.real, self.imag + other.imag)

    def describe(self) -> str:
        """Human readable form of the pair."""
        return f"Your complex number is {self.real}i + {self.imag}"


def sum_real(first: ComplexPair, second: ComplexPair) -> int:
    """Sum of the real parts."""
    return first.real + second.real


def sum_imag(first: ComplexPair, second: ComplexPair) -> int:
    """Sum of the imaginary parts."""
    return first.imag + second.imag


class Shop:
    """A price list holding up to 100 items."""

    CAPACITY = 100

    def __init__(self) -> None:
        self.items: list[tuple[int, int]] = []

    def add_item(self, item_id: int, price: int) -> None:
        """Record the price of an item."""
        if len(self.items) >= self.CAPACITY:
            raise ValueError("shop is full")
        self.items.append((item_id, price))

    def describe(self) -> list[str]:
        """One line per item, in the order they were added."""
        return [
            f"The price of item with Id {item_id} is {price}"
            for item_id, price in self.items
        ]


@dataclass
class EmployeeRegistry:
    """Numbers employees as they register, counting on from ``start``."""

    start: int = 1000
    _numbers: dict[int, int] = field(default_factory=dict, init=False, repr=False)

    def __post_init__(self) -> None:
        self._count = self.start

    def register(self, employee_id: int) -> int:
        """Register an employee and return the number given to them."""
        self._count += 1
        self._numbers[employee_id] = self._count
        return self._count

    def describe(self, employee_id: int) -> str:
        """Describe a registered employee; raises ``KeyError`` for unknown ids."""
        number = self._numbers[employee_id]
        return f"The id of the employee is {employee_id}and this is Employee no: {number}"


def ones_complement(bits: str) -> str:
    """Flip every digit of a binary string; raises ``ValueError`` on other characters."""
    if any(ch not in "01" for ch in bits):
        raise ValueError("Incorrect binary format")
    return bits.translate(str.maketrans("01", "10"))