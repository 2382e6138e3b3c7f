"""Exact ring arithmetic: big integers, quotient rings, number theory."""

import logging

from rings.errors import (RingError, ParseError, NotInvertibleError,
                          ModulusError, RingMismatchError)
from rings.common import Ring, EuclideanRing, RingOps, EuclideanOps, power
from rings.zz import ZZ
from rings.numtheory import (div_mod, gcd, ext_gcd, inv_mod, pow_mod,
                             is_prime_mr, is_perfect_power, root)
from rings.rmod import QuotientRing, Residue
from rings.zzmod import ZZmod, ZZResidue
from rings import rng

logging.getLogger(__name__).addHandler(logging.NullHandler())
