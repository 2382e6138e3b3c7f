"""Integers modulo m: the quotient ring ZZ/(m) with integer-specific shortcuts."""

from typing import Optional

from rings.errors import ModulusError, NotInvertibleError
from rings.numtheory import inv_mod, pow_mod
from rings.rmod import QuotientRing, Residue
from rings.zz import ZZ


class ZZResidue(Residue):
    """Residue class of an integer modulo the ring's modulus."""

    __slots__ = ()

    def __neg__(self) -> 'ZZResidue':
        if not self._value:
            return self.copy()
        return ZZResidue(self._ring, self._ring._checked_modulus() - self._value)

    def inverse(self) -> Optional['ZZResidue']:
        inv = inv_mod(self._value, self._ring._checked_modulus())
        if inv is None:
            return None
        return ZZResidue(self._ring, inv)

    def __pow__(self, e):
        """Modular power through pow_mod; negative e needs an invertible base."""
        if not isinstance(e, (int, ZZ)):
            return NotImplemented
        result = pow_mod(self._value, e, self._ring._checked_modulus())
        if result is None:
            raise NotInvertibleError(f"{self} is not invertible modulo {self.modulus}")
        return ZZResidue(self._ring, result)

    def __int__(self):
        return self._value.to_int()


class ZZmod(QuotientRing):
    """ZZ/(m) for a positive modulus m.

    >>> F = ZZmod(97)
    >>> F(5) * F(20)
    ZZResidue(ZZ(3), binding=0)
    """

    element_class = ZZResidue

    def __init__(self, modulus=None, binding=0, formatter=None):
        super().__init__(ZZ, modulus=modulus, binding=binding, formatter=formatter)

    def init(self, modulus):
        if ZZ(modulus) <= 0:
            raise ModulusError(f"modulus must be positive, got {modulus}")
        super().init(modulus)
