"""Calculator with basic arithmetic and a scientific mode."""

from __future__ import annotations

import math

from lib.config import CalculatorConfig, DEFAULT_NAME, load_calculator_config
from lib.logger import get_logger

log = get_logger("CALCULATOR")


class CalculatorError(Exception):
    """Base class for calculator failures."""


class DivisionByZero(CalculatorError, ZeroDivisionError):
    """Raised when dividing by exactly zero."""


class UnsupportedOperation(CalculatorError, RuntimeError):
    """Raised when a scientific operation is used in basic mode."""


class InvalidArgument(CalculatorError, ValueError):
    """Raised when an operand is outside an operation's domain."""


def _is_odd_integer(value: float) -> bool:
    if isinstance(value, int):
        return value % 2 == 1
    return math.isfinite(value) and value.is_integer() and int(value) % 2 == 1


def _to_float(value: float) -> float:
    try:
        return float(value)
    except OverflowError:
        # Only ints can be too large for a float
        return math.inf if value > 0 else -math.inf


def _ieee_pow(base: float, exponent: float) -> float:
    """math.pow, with domain and range errors mapped to NaN/inf like C pow.

    Ints too large for a float become +/-inf, keeping the exponent's parity
    so a negative base still gets the right sign.
    """
    odd = _is_odd_integer(exponent)
    base, exponent_f = _to_float(base), _to_float(exponent)
    try:
        result = math.pow(base, exponent_f)
    except OverflowError:
        return -math.inf if base < 0 and odd else math.inf
    except ValueError:
        if base == 0:
            # Zero to a negative power is a pole, signed for odd exponents
            return math.copysign(math.inf, base) if odd else math.inf
        # Negative base with a non-integer exponent
        return math.nan
    if math.isinf(exponent_f) and odd and base < 0:
        return -result
    return result


class Calculator:
    """Simple calculator; power and square_root need scientific mode."""

    def __init__(self, name: str = DEFAULT_NAME, scientific: bool = False):
        self.name = name
        self.scientific = scientific
        log.debug("Calculator created", calculator_name=name, scientific=scientific)

    @classmethod
    def from_config(cls, config: CalculatorConfig | None = None) -> Calculator:
        """Build a calculator from loaded configuration defaults."""
        if config is None:
            config = load_calculator_config()
        return cls(config.name, config.scientific)

    def add(self, a: float, b: float) -> float:
        """Return the sum of a and b."""
        return a + b

    def subtract(self, a: float, b: float) -> float:
        """Return the difference of a and b."""
        return a - b

    def multiply(self, a: float, b: float) -> float:
        """Return the product of a and b."""
        return a * b

    def divide(self, a: float, b: float) -> float:
        """Return the quotient of a divided by b."""
        if b == 0:
            raise DivisionByZero("Cannot divide by zero")
        return a / b

    def power(self, base: float, exponent: float) -> float:
        """Return base raised to exponent.

        Raises:
            UnsupportedOperation: If the calculator is not in scientific mode
        """
        self._require_scientific("power")
        return _ieee_pow(base, exponent)

    def square_root(self, number: float) -> float:
        """Return the non-negative square root of number.

        Raises:
            UnsupportedOperation: If the calculator is not in scientific mode
            InvalidArgument: If number is negative
        """
        self._require_scientific("square_root")
        if number < 0:
            raise InvalidArgument(
                f"Cannot take the square root of a negative number: {number}"
            )
        return math.sqrt(number)

    def get_name(self) -> str:
        return self.name

    def set_name(self, name: str) -> None:
        log.debug("Calculator renamed", old_name=self.name, new_name=name)
        self.name = name

    def is_scientific(self) -> bool:
        return self.scientific

    def set_scientific(self, scientific: bool) -> None:
        if scientific != self.scientific:
            log.debug(
                "Calculator mode changed",
                calculator_name=self.name,
                scientific=scientific,
            )
        self.scientific = scientific

    def _require_scientific(self, operation: str) -> None:
        if not self.scientific:
            raise UnsupportedOperation(
                f"'{operation}' is only available in scientific mode"
            )

    def __str__(self) -> str:
        return self.name + (" (Scientific)" if self.scientific else " (Basic)")

    def __repr__(self) -> str:
        return f"Calculator(name={self.name!r}, scientific={self.scientific!r})"
