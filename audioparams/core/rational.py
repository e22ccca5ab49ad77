"""Exact fraction type used for time bases and stream positions."""

from fractions import Fraction
from math import gcd
from typing import Union


class Rational:
    """Immutable fraction kept in lowest terms with a positive denominator.

    Time values are carried as Rational so repeated time/sample/byte
    conversions never accumulate floating point error.
    """

    __slots__ = ("_num", "_den")

    def __init__(self, numerator: int = 0, denominator: int = 1) -> None:
        """Initialize rational.

        Args:
            numerator: Fraction numerator
            denominator: Fraction denominator, must be non-zero

        Raises:
            ZeroDivisionError: If denominator is 0
        """
        numerator = int(numerator)
        denominator = int(denominator)
        if denominator == 0:
            raise ZeroDivisionError(f"Rational({numerator}, 0)")

        if denominator < 0:
            numerator, denominator = -numerator, -denominator

        divisor = gcd(numerator, denominator)
        self._num = numerator // divisor
        self._den = denominator // divisor

    @property
    def numerator(self) -> int:
        return self._num

    @property
    def denominator(self) -> int:
        return self._den

    @classmethod
    def from_string(cls, text: str) -> "Rational":
        """Parse ``"n/d"`` or a plain integer.

        Raises:
            ValueError: If text is not a fraction
        """
        parts = text.strip().split("/")
        if len(parts) == 1:
            return cls(int(parts[0]))
        if len(parts) == 2:
            return cls(int(parts[0]), int(parts[1]))
        raise ValueError(f"Invalid rational: {text!r}")

    @classmethod
    def from_double(cls, value: float, max_denominator: int = 1_000_000) -> "Rational":
        """Closest fraction to ``value`` with a bounded denominator (lossy)."""
        approx = Fraction(value).limit_denominator(max_denominator)
        return cls(approx.numerator, approx.denominator)

    def to_double(self) -> float:
        return self._num / self._den

    def is_null(self) -> bool:
        return self._num == 0

    def flipped(self) -> "Rational":
        """Reciprocal.

        Raises:
            ZeroDivisionError: If this rational is zero
        """
        return Rational(self._den, self._num)

    def rounded(self) -> int:
        """Nearest integer, halves rounded away from zero."""
        magnitude = (2 * abs(self._num) + self._den) // (2 * self._den)
        return -magnitude if self._num < 0 else magnitude

    @staticmethod
    def _coerce(other: object) -> "Rational | None":
        if isinstance(other, Rational):
            return other
        if isinstance(other, int):
            return Rational(other)
        if isinstance(other, Fraction):
            return Rational(other.numerator, other.denominator)
        return None

    def __add__(self, other: Union["Rational", int]) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._den + rhs._num * self._den, self._den * rhs._den)

    __radd__ = __add__

    def __sub__(self, other: Union["Rational", int]) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._den - rhs._num * self._den, self._den * rhs._den)

    def __rsub__(self, other: int) -> "Rational":
        return -self + other

    def __mul__(self, other: Union["Rational", int]) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._num, self._den * rhs._den)

    __rmul__ = __mul__

    def __truediv__(self, other: Union["Rational", int]) -> "Rational":
        rhs = self._coerce(other)
        if rhs is None:
            return NotImplemented
        return Rational(self._num * rhs._den, self._den * rhs._num)

    def __rtruediv__(self, other: int) -> "Rational":
        return self.flipped() * other

    def __neg__(self) -> "Rational":
        return Rational(-self._num, self._den)

    def __abs__(self) -> "Rational":
        return Rational(abs(self._num), self._den)

    def __float__(self) -> float:
        return self.to_double()

    def __bool__(self) -> bool:
        return self._num != 0

    def _compare(self, other: object) -> "tuple[int, int] | None":
        """Cross-multiplied (lhs, rhs) pair, or None if not comparable."""
        if isinstance(other, float):
            return None
        rhs = self._coerce(other)
        if rhs is None:
            return None
        return self._num * rhs._den, rhs._num * self._den

    def __eq__(self, other: object) -> bool:
        if isinstance(other, float):
            return self.to_double() == other
        pair = self._compare(other)
        if pair is None:
            return NotImplemented
        return pair[0] == pair[1]

    def __lt__(self, other: object) -> bool:
        if isinstance(other, float):
            return self.to_double() < other
        pair = self._compare(other)
        if pair is None:
            return NotImplemented
        return pair[0] < pair[1]

    def __le__(self, other: object) -> bool:
        if isinstance(other, float):
            return self.to_double() <= other
        pair = self._compare(other)
        if pair is None:
            return NotImplemented
        return pair[0] <= pair[1]

    def __gt__(self, other: object) -> bool:
        if isinstance(other, float):
            return self.to_double() > other
        pair = self._compare(other)
        if pair is None:
            return NotImplemented
        return pair[0] > pair[1]

    def __ge__(self, other: object) -> bool:
        if isinstance(other, float):
            return self.to_double() >= other
        pair = self._compare(other)
        if pair is None:
            return NotImplemented
        return pair[0] >= pair[1]

    def __hash__(self) -> int:
        # Same hash as the equal int, Fraction or float
        return hash(Fraction(self._num, self._den))

    def __repr__(self) -> str:
        return f"Rational({self._num}, {self._den})"

    def __str__(self) -> str:
        return f"{self._num}/{self._den}"
