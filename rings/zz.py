"""Arbitrary-precision integers as a Euclidean ring, backed by gmpy2."""

from typing import Optional

import gmpy2

from rings import rng
from rings.common import EuclideanOps
from rings.errors import NotInvertibleError, ParseError

DEFAULT_BASE = 10
MIN_BASE = 2
MAX_BASE = 62

_PREFIXES = {2: "0b", 8: "0o", 16: "0x"}
_MPZ = type(gmpy2.mpz(0))
_WORD_BITS = 64
_WORD_MASK = (1 << _WORD_BITS) - 1


def _check_base(base: int):
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be in [{MIN_BASE}, {MAX_BASE}], got {base}")


def _to_mpz(value):
    """Backend integer for value, or None if value is not integer-like."""
    if isinstance(value, ZZ):
        return value._data
    if isinstance(value, (int, _MPZ)):
        return gmpy2.mpz(value)
    return None


class ZZ(EuclideanOps):
    """Exact signed integer of arbitrary precision.

    Division and remainder use floor rounding: the quotient rounds toward
    minus infinity and the remainder takes the sign of the divisor.
    """

    __slots__ = ('_data',)

    _zero = None
    _one = None

    def __init__(self, value=0, base: int | None = None):
        if isinstance(value, str):
            if base is None:
                base = 0
            elif base != 0:
                _check_base(base)
            try:
                self._data = gmpy2.mpz(value.strip(), base)
            except ValueError as e:
                raise ParseError(f"invalid integer {value!r} for base {base}") from e
            return
        if base is not None:
            raise TypeError("ZZ() can't convert non-string with explicit base")
        data = _to_mpz(value)
        if data is None:
            raise TypeError(f"cannot build ZZ from {type(value).__name__}")
        self._data = data

    # --- identities ---

    @classmethod
    def zero(cls) -> 'ZZ':
        """Additive identity. Callers get a private copy of the shared value."""
        if cls._zero is None:
            cls._zero = cls(0)
        return cls._zero.copy()

    @classmethod
    def one(cls) -> 'ZZ':
        """Multiplicative identity, returned as a private copy."""
        if cls._one is None:
            cls._one = cls(1)
        return cls._one.copy()

    def copy(self) -> 'ZZ':
        return ZZ(self)

    def _coerce(self, other):
        if isinstance(other, ZZ):
            return other
        data = _to_mpz(other)
        if data is None:
            return NotImplemented
        return ZZ(data)

    # --- in-place primitives ---

    def iadd(self, other) -> 'ZZ':
        self._data = self._data + _to_mpz(other)
        return self

    def isub(self, other) -> 'ZZ':
        self._data = self._data - _to_mpz(other)
        return self

    def imul(self, other) -> 'ZZ':
        self._data = self._data * _to_mpz(other)
        return self

    def ifloordiv(self, other) -> 'ZZ':
        self._data = gmpy2.f_div(self._data, _to_mpz(other))
        return self

    def imod(self, other) -> 'ZZ':
        self._data = gmpy2.f_mod(self._data, _to_mpz(other))
        return self

    def increment(self) -> 'ZZ':
        self._data += 1
        return self

    def decrement(self) -> 'ZZ':
        self._data -= 1
        return self

    @staticmethod
    def swap(a: 'ZZ', b: 'ZZ'):
        """Exchange the values of a and b in place."""
        a._data, b._data = b._data, a._data

    # --- unary ---

    def __neg__(self) -> 'ZZ':
        return ZZ(-self._data)

    def __pos__(self) -> 'ZZ':
        return self.copy()

    def __abs__(self) -> 'ZZ':
        return ZZ(abs(self._data))

    def inverse(self) -> Optional['ZZ']:
        """Only 1 and -1 are units in the integers."""
        if self._data == 1 or self._data == -1:
            return self.copy()
        return None

    def inverse_mod(self, modulus) -> Optional['ZZ']:
        from rings.numtheory import inv_mod
        return inv_mod(self, modulus)

    def __pow__(self, e, modulus=None):
        if modulus is not None:
            from rings.numtheory import pow_mod
            result = pow_mod(self, e, modulus)
            if result is None:
                raise NotInvertibleError(f"{self} is not invertible modulo {modulus}")
            return result
        e = _to_mpz(e)
        if e is None:
            return NotImplemented
        if e < 0:
            return super().__pow__(e)
        return ZZ(self._data ** e)

    def __divmod__(self, other):
        other = _to_mpz(other)
        if other is None:
            return NotImplemented
        q, r = gmpy2.f_divmod(self._data, other)
        return ZZ(q), ZZ(r)

    def __rdivmod__(self, other):
        other = _to_mpz(other)
        if other is None:
            return NotImplemented
        q, r = gmpy2.f_divmod(other, self._data)
        return ZZ(q), ZZ(r)

    def __rfloordiv__(self, other):
        """Native integer divided by a ZZ gives a native integer."""
        if not isinstance(other, int):
            return super().__rfloordiv__(other)
        return int(gmpy2.f_div(gmpy2.mpz(other), self._data))

    def __lshift__(self, bits: int) -> 'ZZ':
        return ZZ(self._data << bits)

    def __rshift__(self, bits: int) -> 'ZZ':
        return ZZ(self._data >> bits)

    # --- comparison ---

    def __eq__(self, other):
        other = _to_mpz(other)
        if other is None:
            return NotImplemented
        return self._data == other

    def __lt__(self, other):
        other = _to_mpz(other)
        if other is None:
            return NotImplemented
        return self._data < other

    def __le__(self, other):
        other = _to_mpz(other)
        if other is None:
            return NotImplemented
        return self._data <= other

    def __gt__(self, other):
        other = _to_mpz(other)
        if other is None:
            return NotImplemented
        return self._data > other

    def __ge__(self, other):
        other = _to_mpz(other)
        if other is None:
            return NotImplemented
        return self._data >= other

    def __hash__(self):
        # Equal to hash(int(self)) so ZZ and int keys interoperate.
        return hash(self._data)

    def limb_hash(self) -> int:
        """XOR of the 64-bit words of |self| and the word count."""
        magnitude = int(abs(self._data))
        words = 0
        h = 0
        while magnitude:
            h ^= magnitude & _WORD_MASK
            magnitude >>= _WORD_BITS
            words += 1
        return h ^ words

    # --- bits ---

    def __getitem__(self, i: int) -> bool:
        """Bit i of the two's complement representation."""
        return gmpy2.bit_test(self._data, i)

    # bit access, not a sequence
    __iter__ = None

    def bit_length(self) -> int:
        """Smallest b with |self| < 2**b."""
        return gmpy2.bit_length(self._data)

    # --- conversions ---

    def __bool__(self):
        return self._data != 0

    def __int__(self):
        return int(self._data)

    def __index__(self):
        return int(self._data)

    def to_int(self) -> int:
        return int(self._data)

    def reduce(self, m: int) -> int:
        """self mod m for a native integer m, as a native integer."""
        return int(gmpy2.f_mod(self._data, m))

    @property
    def mpz(self):
        return self._data

    # --- output ---

    def to_string(self, base: int = DEFAULT_BASE) -> str:
        """Minimal-digit representation with a leading '-' when negative."""
        _check_base(base)
        digits = gmpy2.digits(abs(self._data), base)
        prefix = _PREFIXES.get(base)
        if prefix and digits.startswith(prefix):
            digits = digits[len(prefix):]
        return '-' + digits if self._data < 0 else digits

    def string_length(self, base: int = DEFAULT_BASE) -> int:
        """Upper bound on the digit count of to_string(base), sign excluded.

        Exact for base 2 and powers of two; may overcount by one otherwise.
        """
        _check_base(base)
        return gmpy2.num_digits(self._data, base)

    def need_parentheses(self) -> bool:
        return False

    def __str__(self):
        return self.to_string()

    def __repr__(self):
        return f"ZZ({self.to_string()})"

    # --- random ---

    @staticmethod
    def random(bits: int) -> 'ZZ':
        """Uniform in [0, 2**bits)."""
        return ZZ(rng.random_bits(bits))

    @staticmethod
    def random_below(n) -> 'ZZ':
        """Uniform in [0, n)."""
        bound = _to_mpz(n)
        if bound is None:
            raise TypeError(f"bound must be an integer, got {type(n).__name__}")
        return ZZ(rng.random_below(bound))
