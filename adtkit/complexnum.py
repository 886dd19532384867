"""Complex numbers of the form a + bi with text formatting and parsing."""

from __future__ import annotations

import math
import re
from typing import Union

Number = Union[int, float]

_NUM = r"(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?"
_REAL_ONLY = re.compile(rf"([+-]?{_NUM})")
_IMAG_ONLY = re.compile(rf"([+-]?{_NUM})i")
_FULL = re.compile(rf"([+-]?{_NUM})([+-])({_NUM})?i")
_UNIT = re.compile(r"([+-]?)i")


def _is_number(value: object) -> bool:
    return isinstance(value, (int, float))


def _fmt(value: float) -> str:
    return f"{value:g}"


class Complex:
    """A complex number a + bi whose parts can be read and changed."""

    def __init__(self, real: Number = 0.0, imag: Number = 0.0) -> None:
        self._real = float(real)
        self._imag = float(imag)

    @property
    def real(self) -> float:
        """The real part."""
        return self._real

    @real.setter
    def real(self, value: Number) -> None:
        self._real = float(value)

    @property
    def imag(self) -> float:
        """The imaginary part."""
        return self._imag

    @imag.setter
    def imag(self, value: Number) -> None:
        self._imag = float(value)

    @classmethod
    def parse(cls, text: str) -> Complex:
        """Read a number written as a, a+bi, a-bi, a+i, a-i, bi, i, +i or -i."""
        stripped = text.strip()
        match = _REAL_ONLY.fullmatch(stripped)
        if match:
            return cls(float(match.group(1)), 0.0)
        match = _IMAG_ONLY.fullmatch(stripped)
        if match:
            return cls(0.0, float(match.group(1)))
        match = _FULL.fullmatch(stripped)
        if match:
            real = float(match.group(1))
            magnitude = float(match.group(3)) if match.group(3) else 1.0
            imag = magnitude if match.group(2) == "+" else -magnitude
            return cls(real, imag)
        match = _UNIT.fullmatch(stripped)
        if match:
            return cls(0.0, -1.0 if match.group(1) == "-" else 1.0)
        raise ValueError(f"not a complex number: {text!r}")

    def conjugate(self) -> Complex:
        """The complex conjugate a - bi."""
        return Complex(self._real, -self._imag)

    def __add__(self, other: object) -> Complex:
        if isinstance(other, Complex):
            return Complex(self._real + other._real, self._imag + other._imag)
        if _is_number(other):
            return Complex(self._real + other, self._imag)  # type: ignore[operator]
        return NotImplemented

    def __sub__(self, other: object) -> Complex:
        if isinstance(other, Complex):
            return Complex(self._real - other._real, self._imag - other._imag)
        if _is_number(other):
            return Complex(self._real - other, self._imag)  # type: ignore[operator]
        return NotImplemented

    def __mul__(self, other: object) -> Complex:
        if isinstance(other, Complex):
            a, b, c, d = self._real, self._imag, other._real, other._imag
            return Complex(a * c - b * d, a * d + b * c)
        if _is_number(other):
            return Complex(self._real * other, self._imag * other)  # type: ignore[operator]
        return NotImplemented

    def __truediv__(self, other: object) -> Complex:
        if isinstance(other, Complex):
            c, d = other._real, other._imag
            if c == 0 and d == 0:
                raise ZeroDivisionError("division by a zero complex number")
            denominator = c * c + d * d
            a, b = self._real, self._imag
            return Complex((a * c + b * d) / denominator, (b * c - a * d) / denominator)
        if _is_number(other):
            if other == 0:
                raise ZeroDivisionError("division by zero")
            return Complex(self._real / other, self._imag / other)  # type: ignore[operator]
        return NotImplemented

    def __pow__(self, exponent: object) -> Complex:
        if not isinstance(exponent, int) or isinstance(exponent, bool):
            return NotImplemented
        result = Complex(1.0, 0.0)
        if exponent == 0:
            return result
        if exponent > 0:
            base = self
        else:
            if self._real == 0 and self._imag == 0:
                raise ZeroDivisionError("zero raised to a negative power")
            base = Complex(1.0, 0.0) / self
        for _ in range(abs(exponent)):
            result = result * base
        return result

    def __invert__(self) -> Complex:
        return self.conjugate()

    def __neg__(self) -> Complex:
        return Complex(-self._real, -self._imag)

    def __abs__(self) -> float:
        return math.sqrt(self._real * self._real + self._imag * self._imag)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Complex):
            return self._real == other._real and self._imag == other._imag
        if _is_number(other):
            return self._real == other and self._imag == 0
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        a, b = self._real, self._imag
        if b == 0:
            return _fmt(a)
        if b == 1:
            imag_text = "i"
        elif b == -1:
            imag_text = "-i"
        else:
            imag_text = f"{_fmt(b)}i"
        if a == 0:
            return imag_text
        if b > 0:
            return f"{_fmt(a)}+{imag_text}"
        return f"{_fmt(a)}{imag_text}"

    def __repr__(self) -> str:
        return f"Complex({self._real!r}, {self._imag!r})"