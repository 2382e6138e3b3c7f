"""Number-theoretic functions on ZZ: gcd, inverses, modular powers, primality, roots.

All functions accept ZZ or native int arguments and return ZZ values.
Functions that can fail for lack of an inverse return None instead of
raising.
"""

from typing import Optional

import gmpy2

from rings.zz import ZZ

DEFAULT_MR_REPS = 7


def _mpz(value):
    return ZZ(value).mpz


def div_mod(a, b) -> tuple[ZZ, ZZ]:
    """Floor quotient and remainder of a by b in a single pass."""
    q, r = gmpy2.f_divmod(_mpz(a), _mpz(b))
    return ZZ(q), ZZ(r)


def gcd(a, b) -> ZZ:
    """Greatest common divisor, always non-negative."""
    return ZZ(gmpy2.gcd(_mpz(a), _mpz(b)))


def ext_gcd(a, b) -> tuple[ZZ, ZZ, ZZ]:
    """Return (g, s, t) with a*s + b*t == g == gcd(a, b)."""
    g, s, t = gmpy2.gcdext(_mpz(a), _mpz(b))
    return ZZ(g), ZZ(s), ZZ(t)


def inv_mod(a, n) -> Optional[ZZ]:
    """Inverse of a modulo n in [0, |n|), or None if gcd(a, n) != 1."""
    a, n = _mpz(a), _mpz(n)
    if n == 0:
        return None
    g, s, _ = gmpy2.gcdext(a, n)
    if g != 1:
        return None
    return ZZ(gmpy2.f_mod(s, abs(n)))


def pow_mod(a, e, n) -> Optional[ZZ]:
    """a**e mod n by binary exponentiation.

    A negative e needs a to be invertible modulo n; None is returned when it
    is not.
    """
    a, e, n = _mpz(a), _mpz(e), _mpz(n)
    if n == 0:
        raise ZeroDivisionError("pow_mod() modulus is zero")
    if e < 0 and gmpy2.gcd(a, n) != 1:
        return None
    return ZZ(gmpy2.powmod(a, e, n))


def is_prime_mr(n, reps: int = DEFAULT_MR_REPS) -> bool:
    """Miller-Rabin test. Never wrong for primes; composites pass with
    probability at most 4**-reps."""
    n = _mpz(n)
    if n < 2:
        return False
    return gmpy2.is_prime(n, reps)


def is_perfect_power(n) -> bool:
    """True iff n is a**k for some integer a and k >= 2, excluding 0 and 1."""
    n = _mpz(n)
    if n == 0 or n == 1:
        return False
    return gmpy2.is_power(n)


def root(n, k: int) -> tuple[bool, ZZ]:
    """Return (exact, r) where r = floor(n ** (1/k)) and exact is r**k == n."""
    if k < 1:
        raise ValueError(f"root degree must be positive, got {k}")
    n = _mpz(n)
    if n < 0:
        if k % 2 == 0:
            raise ValueError("even root of a negative number")
        r, exact = gmpy2.iroot(-n, k)
        r = -r if exact else -r - 1
        return bool(exact), ZZ(r)
    r, exact = gmpy2.iroot(n, k)
    return bool(exact), ZZ(r)
