"""Quotient rings R/(m) over any Euclidean ring R.

A QuotientRing is the context that owns the modulus; its elements
(Residue) keep a reference to it and always hold the canonical
representative, the floor remainder of their value by the modulus. Two
QuotientRing objects are different rings even if the base type and modulus
agree, unless they also share the same binding identifier.
"""

import logging
import threading
from typing import Callable, Optional

from rings.common import RingOps
from rings.errors import ModulusError, NotInvertibleError, RingMismatchError

logger = logging.getLogger(__name__)


def _default_formatter(residue: 'Residue') -> str:
    return str(residue.representative)


def _bit_length(value) -> int:
    bit_length = getattr(value, 'bit_length', None)
    return bit_length() if bit_length is not None else 0


class Residue(RingOps):
    """Element of a QuotientRing, kept in canonical reduced form."""

    __slots__ = ('_ring', '_value')

    def __init__(self, ring: 'QuotientRing', value):
        self._ring = ring
        self._value = value

    @property
    def ring(self) -> 'QuotientRing':
        return self._ring

    @property
    def representative(self):
        return self._value.copy()

    @property
    def modulus(self):
        return self._ring.modulus

    def zero(self) -> 'Residue':
        return self._ring.zero()

    def one(self) -> 'Residue':
        return self._ring.one()

    def copy(self) -> 'Residue':
        return type(self)(self._ring, self._value.copy())

    def _coerce(self, other):
        if isinstance(other, Residue):
            self._check_ring(other)
            return other
        if isinstance(other, (int, self._ring.base)):
            return self._ring(other)
        return NotImplemented

    def _check_ring(self, other: 'Residue'):
        if other._ring is not self._ring and other._ring != self._ring:
            raise RingMismatchError(f"cannot combine {self._ring!r} and {other._ring!r}")

    # --- in-place primitives ---

    def iadd(self, other: 'Residue') -> 'Residue':
        self._value.iadd(other._value)
        self._ring.reduce(self._value)
        return self

    def isub(self, other: 'Residue') -> 'Residue':
        self._value.isub(other._value)
        self._ring.reduce(self._value)
        return self

    def imul(self, other: 'Residue') -> 'Residue':
        self._value.imul(other._value)
        self._ring.reduce(self._value)
        return self

    def swap(self, other: 'Residue'):
        """Exchange the values of self and other in place."""
        self._check_ring(other)
        self._value, other._value = other._value, self._value

    # --- unary ---

    def __neg__(self) -> 'Residue':
        return type(self)(self._ring, self._ring.reduce(-self._value))

    def inverse(self) -> Optional['Residue']:
        """Multiplicative inverse, or None when the representative shares a
        factor with the modulus."""
        inv = self._value.inverse_mod(self._ring._checked_modulus())
        if inv is None:
            return None
        return self._ring(inv)

    def __invert__(self) -> 'Residue':
        return self._invert_or_raise()

    def _invert_or_raise(self) -> 'Residue':
        inv = self.inverse()
        if inv is None:
            raise NotInvertibleError(f"{self} is not invertible modulo {self.modulus}")
        return inv

    def __truediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self * other._invert_or_raise()

    def __rtruediv__(self, other):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return other * self._invert_or_raise()

    # --- comparison ---

    def __eq__(self, other):
        # residues only: the hash mixes in the binding
        if not isinstance(other, Residue):
            return NotImplemented
        return self._ring == other._ring and self._value == other._value

    def __hash__(self):
        return hash(self._value) ^ hash(self._ring.binding)

    def __bool__(self):
        return bool(self._value)

    # --- output ---

    def string_length(self) -> int:
        return self._value.string_length()

    def need_parentheses(self) -> bool:
        return self._value.need_parentheses()

    def __str__(self):
        return self._ring.formatter(self)

    def __repr__(self):
        return f"{type(self).__name__}({self._value!r}, binding={self._ring.binding!r})"


class QuotientRing:
    """Context holding the shared modulus of one binding.

    The modulus may be given at construction or later through init(). Once
    elements have been built, init() refuses a different modulus.
    """

    element_class = Residue

    def __init__(self, base, modulus=None, binding=0,
                 formatter: Callable[['Residue'], str] | None = None):
        self.base = base
        self.binding = binding
        self.formatter = formatter or _default_formatter
        self._modulus = None
        self._in_use = False
        self._zero: Optional['Residue'] = None
        self._one: Optional['Residue'] = None
        self._lock = threading.Lock()
        if modulus is not None:
            self.init(modulus)

    def init(self, modulus):
        """Set the modulus; must happen before any element is built."""
        modulus = self.base(modulus)
        if not modulus:
            raise ModulusError("modulus must be non-zero")
        with self._lock:
            if self._modulus is not None and self._modulus != modulus:
                if self._in_use:
                    raise ModulusError(
                        f"binding {self.binding!r} already in use with modulus {self._modulus}")
                self._zero = self._one = None
            self._modulus = modulus
        logger.debug("binding %r initialised, modulus of %d bits",
                     self.binding, _bit_length(modulus))

    @property
    def initialized(self) -> bool:
        return self._modulus is not None

    @property
    def modulus(self):
        return self._checked_modulus().copy()

    def _checked_modulus(self):
        if self._modulus is None:
            raise ModulusError(f"binding {self.binding!r} used before init()")
        return self._modulus

    def reduce(self, value):
        """Canonical representative of value, which is modified in place."""
        return value.imod(self._checked_modulus())

    def __call__(self, source) -> 'Residue':
        if isinstance(source, Residue):
            if source.ring != self:
                raise RingMismatchError(f"{source!r} does not belong to {self!r}")
            return source.copy()
        value = self.reduce(self.base(source))
        if not self._in_use:
            self._in_use = True
        return self.element_class(self, value)

    def zero(self) -> 'Residue':
        if self._zero is None:
            with self._lock:
                if self._zero is None:
                    self._zero = self(self.base.zero())
        return self._zero.copy()

    def one(self) -> 'Residue':
        if self._one is None:
            with self._lock:
                if self._one is None:
                    self._one = self(self.base.one())
        return self._one.copy()

    def random(self) -> 'Residue':
        """Uniform element, drawn below the modulus."""
        return self(self.base.random_below(self.modulus))

    def __eq__(self, other):
        if not isinstance(other, QuotientRing):
            return NotImplemented
        if self is other:
            return True
        return (self.base is other.base and self.binding == other.binding
                and self._modulus is not None and self._modulus == other._modulus)

    def __hash__(self):
        return hash((self.base, self.binding))

    def __repr__(self):
        modulus = self._modulus if self._modulus is not None else '?'
        return f"{type(self).__name__}({self.base.__name__}, {modulus}, binding={self.binding!r})"


