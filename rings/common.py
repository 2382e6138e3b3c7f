"""Ring interface and ring-agnostic algorithms.

A type is a ring for the purposes of this package if it structurally provides
the methods listed in Ring: identities, in-place add/sub/mul on a private
copy, negation, an inverse that returns None when none exists, equality and
hashing. Binary operators are derived from the in-place primitives by
copy-then-update, so using an operator never mutates an operand.
"""

import operator
from typing import Optional, Protocol, TypeVar, runtime_checkable

from rings.errors import NotInvertibleError

R = TypeVar("R", bound="Ring")


@runtime_checkable
class Ring(Protocol):
    """Operations the generic algorithms rely on."""

    def zero(self): ...

    def one(self): ...

    def copy(self): ...

    def iadd(self, other): ...

    def isub(self, other): ...

    def imul(self, other): ...

    def __neg__(self): ...

    def inverse(self) -> Optional["Ring"]: ...

    def __eq__(self, other) -> bool: ...

    def __hash__(self) -> int: ...

    def string_length(self) -> int: ...

    def need_parentheses(self) -> bool: ...


@runtime_checkable
class EuclideanRing(Ring, Protocol):
    """A ring that also has floor division with remainder."""

    def ifloordiv(self, other): ...

    def imod(self, other): ...

    def inverse_mod(self, modulus) -> Optional["EuclideanRing"]: ...


class RingOps:
    """Binary operators derived from the in-place primitives.

    Subclasses implement copy(), iadd(), isub(), imul() and _coerce(), which
    turns a foreign operand into an element of the same ring (or returns
    NotImplemented).
    """

    __slots__ = ()

    def _coerce(self, other):
        raise NotImplementedError

    def _apply(self, other, method: str, reflected: bool = False):
        other = self._coerce(other)
        if other is NotImplemented:
            return NotImplemented
        if reflected:
            return getattr(other.copy(), method)(self)
        return getattr(self.copy(), method)(other)

    def __add__(self, other):
        return self._apply(other, "iadd")

    def __radd__(self, other):
        return self._apply(other, "iadd", reflected=True)

    def __sub__(self, other):
        return self._apply(other, "isub")

    def __rsub__(self, other):
        return self._apply(other, "isub", reflected=True)

    def __mul__(self, other):
        return self._apply(other, "imul")

    def __rmul__(self, other):
        return self._apply(other, "imul", reflected=True)

    def __pow__(self, n):
        return power(self, n)


class EuclideanOps(RingOps):
    """Adds floor division and remainder to RingOps."""

    __slots__ = ()

    def __floordiv__(self, other):
        return self._apply(other, "ifloordiv")

    def __rfloordiv__(self, other):
        return self._apply(other, "ifloordiv", reflected=True)

    def __mod__(self, other):
        return self._apply(other, "imod")

    def __rmod__(self, other):
        return self._apply(other, "imod", reflected=True)


def power(a: R, n) -> R:
    """Compute a**n by left-to-right square-and-multiply.

    n may be any integer-like value (int or ZZ). n == 0 gives the
    multiplicative identity regardless of a. For n < 0, a is replaced by its
    inverse; NotInvertibleError is raised when a has none.
    """
    n = operator.index(n)
    result = a.one().copy()
    if n == 0:
        return result

    if n < 0:
        inv = a.inverse()
        if inv is None:
            raise NotInvertibleError(f"{a} is not invertible")
        a, n = inv, -n

    for i in reversed(range(n.bit_length())):
        result = result * result
        if (n >> i) & 1:
            result.imul(a)
    return result
