"""Real roots of monic cubic polynomials."""

from __future__ import annotations

import math


def solve_cubic(a0: float, a1: float, a2: float) -> tuple[float, ...]:
    """Real roots of ``x**3 + a2*x**2 + a1*x + a0 = 0``.

    Returns either one root or three roots (repeated roots are listed
    repeatedly); three distinct roots are returned in ascending order.
    """
    q = a2 * a2 - 3 * a1
    r = 2 * a2 * a2 * a2 - 9 * a2 * a1 + 27 * a0
    bq = q / 9
    br = r / 54
    bq3 = bq * bq * bq
    br2 = br * br
    cr2 = 729 * r * r
    cq3 = 2916 * q * q * q
    sgnbr = 1.0 if br >= 0 else -1.0
    shift = a2 / 3

    if br == 0 and bq == 0:
        root = -shift
        return (root, root, root)

    if cr2 == cq3:
        sqrtbq = math.sqrt(bq)
        if br > 0:
            return (-2 * sqrtbq - shift, sqrtbq - shift, sqrtbq - shift)
        return (-sqrtbq - shift, -sqrtbq - shift, 2 * sqrtbq - shift)

    if br2 < bq3:
        ratio = sgnbr * math.sqrt(br2 / bq3)
        theta = math.acos(ratio)
        norm = -2 * math.sqrt(bq)
        roots = sorted(
            (
                norm * math.cos(theta / 3) - shift,
                norm * math.cos((theta + 2.0 * math.pi) / 3) - shift,
                norm * math.cos((theta - 2.0 * math.pi) / 3) - shift,
            )
        )
        return tuple(roots)

    ba = -sgnbr * (abs(br) + math.sqrt(br2 - bq3)) ** (1.0 / 3.0)
    bb = bq / ba
    return (ba + bb - shift,)