"""
Congruence Solver (Day 13 core)

Solves systems of linear congruences x ≡ r (mod m) with pairwise coprime
moduli by folding the Chinese Remainder Theorem one constraint at a time.

Building blocks (leaves first):
  - mod_inverse: extended Euclid, Bézout coefficient of a modulo n
  - linear_eq_mod: free parameter c1 of k = a + c1*m with k ≡ b (mod n)
  - combine / solve_congruences: generic CRT fold over (residue, modulus)
  - fold_delays / earliest_aligned_timestamp: bus schedule front end

All arithmetic is on Python ints, so intermediate products never overflow.
"""

import logging
import math
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple


class NoInverseError(ValueError):
    """Raised when a modular inverse does not exist (moduli not coprime)."""


class Constraint(NamedTuple):
    """x ≡ residue (mod modulus)."""

    residue: int
    modulus: int


class PartialSolution(NamedTuple):
    """Unique solution class modulo the product of the moduli folded so far."""

    residue: int
    modulus: int


IDENTITY = PartialSolution(0, 1)


def mod_inverse(a: int, n: int) -> int:
    """
    Find the multiplicative inverse of a modulo n.

    Iterative extended Euclid tracking the remainders (r, r_new) and the
    Bézout coefficients (t, t_new).

    Args:
        a: Value to invert (any integer, reduced modulo n first)
        n: Positive modulus

    Returns:
        t in [0, n) with (a * t) % n == 1

    Raises:
        NoInverseError: if gcd(a, n) != 1
    """
    if n <= 0:
        raise ValueError(f"Modulus must be positive, got {n}")

    t, t_new = 0, 1
    r, r_new = n, a % n
    while r_new != 0:
        q = r // r_new
        t, t_new = t_new, t - q * t_new
        r, r_new = r_new, r - q * r_new

    if r > 1:
        raise NoInverseError(f"{a} has no inverse modulo {n} (gcd={r})")
    if t < 0:
        t += n
    return t


def linear_eq_mod(a: int, m: int, b: int, n: int) -> int:
    """
    Find the lowest c1 >= 0 such that k = a + c1*m and k ≡ b (mod n).

    k = c1 * m + a and k = c2 * n + b, hence c1 = (b - a) * m^-1 mod n.

    Args:
        a: Known offset of k
        m: Step of k (must be coprime with n)
        b: Required residue of k modulo n
        n: Modulus of the new congruence

    Returns:
        c1 in [0, n)
    """
    m_inv = mod_inverse(m % n, n)
    diff = (b - a) % n
    return (diff * m_inv) % n


def combine(partial: PartialSolution, residue: int, modulus: int) -> PartialSolution:
    """
    Merge one congruence x ≡ residue (mod modulus) into a partial solution.

    Args:
        partial: Current class x ≡ partial.residue (mod partial.modulus)
        residue: Residue of the new constraint
        modulus: Modulus of the new constraint (coprime with partial.modulus)

    Returns:
        New PartialSolution modulo partial.modulus * modulus, residue canonical
    """
    a, m = partial
    c1 = linear_eq_mod(a, m, residue, modulus)
    return PartialSolution(c1 * m + a, modulus * m)


def check_pairwise_coprime(moduli: Sequence[int]) -> None:
    """Raise NoInverseError on the first pair of moduli sharing a factor."""
    for m in moduli:
        if m <= 0:
            raise ValueError(f"Modulus must be positive, got {m}")
    for i, m_i in enumerate(moduli):
        for m_j in moduli[i + 1:]:
            g = math.gcd(m_i, m_j)
            if g != 1:
                raise NoInverseError(
                    f"Moduli {m_i} and {m_j} are not coprime (gcd={g})"
                )


def solve_congruences(
    constraints: Iterable[Tuple[int, int]],
    validate: bool = True,
) -> PartialSolution:
    """
    Solve x ≡ r_i (mod m_i) for all (r_i, m_i).

    Args:
        constraints: (residue, modulus) pairs
        validate: Check pairwise coprimality before folding

    Returns:
        PartialSolution(residue, modulus) where residue is the minimal
        non-negative solution and modulus the product of all moduli.
        An empty system yields the identity (0, 1).
    """
    constraints = [Constraint(r, m) for r, m in constraints]
    if validate:
        check_pairwise_coprime([c.modulus for c in constraints])

    partial = IDENTITY
    for residue, modulus in constraints:
        partial = combine(partial, residue, modulus)
    return partial


def parse_schedule(line: str) -> List[Optional[int]]:
    """
    Parse a comma separated bus schedule, "x" meaning no constraint.

    Raises:
        ValueError: on a token that is neither "x" nor a positive integer
    """
    schedule: List[Optional[int]] = []
    for token in line.strip().split(","):
        token = token.strip()
        if token == "x":
            schedule.append(None)
            continue
        bus_id = int(token)
        if bus_id <= 0:
            raise ValueError(f"Bus id must be positive, got {bus_id}")
        schedule.append(bus_id)
    return schedule


def bus_constraints(schedule: Sequence[Optional[int]]) -> List[Tuple[int, int]]:
    """Return (position, bus_id) for every scheduled bus."""
    return [(i, bus_id) for i, bus_id in enumerate(schedule) if bus_id is not None]


def fold_delays(equations: Iterable[Tuple[int, int]], base_modulus: int) -> PartialSolution:
    """
    Fold (bus_id, delay) equations into the class of the multiplier k.

    The answer is advanced by k * base_modulus; every equation requires
    k * base_modulus ≡ delay (mod bus_id).

    Returns:
        PartialSolution for k (identity when there are no equations)
    """
    k = IDENTITY
    for bus_id, delay in equations:
        c1 = linear_eq_mod(0, base_modulus, delay, bus_id)
        k = combine(k, c1, bus_id)
    return k


def earliest_aligned_timestamp(schedule: Sequence[Optional[int]], validate: bool = True) -> int:
    """
    Earliest t >= 0 such that the bus at position i departs at t + i.

    Args:
        schedule: Bus ids by position, None for "x"
        validate: Check pairwise coprimality of the bus ids first

    Returns:
        Minimal non-negative aligned timestamp
    """
    constraints = bus_constraints(schedule)
    if not constraints:
        raise ValueError("Schedule contains no buses")
    if validate:
        check_pairwise_coprime([bus_id for _, bus_id in constraints])

    # Start with the smallest t satisfying the highest id
    max_index, max_id = max(constraints, key=lambda c: c[1])
    t = (-max_index) % max_id

    # (id, delay): to satisfy id, t must be increased by delay mod id.
    # A zero delay still pins k ≡ 0 (mod id), only the base bus is implied.
    equations: List[Tuple[int, int]] = []
    for i, bus_id in constraints:
        if i == max_index:
            continue
        equations.append((bus_id, (-(t + i)) % bus_id))

    k = fold_delays(equations, max_id)
    logging.debug(
        f"base id={max_id} t0={t} equations={len(equations)} k={k.residue} mod {k.modulus}"
    )
    return t + k.residue * max_id
