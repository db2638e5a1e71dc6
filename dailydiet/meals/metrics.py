# -*- coding: utf-8 -*-
"""Meals — derived metrics."""

from __future__ import annotations

from typing import Iterable


def best_on_diet_sequence(flags: Iterable[bool]) -> int:
    """Longest run of consecutive on-diet meals.

    ``flags`` must already be in date order (either direction gives the same
    answer). An off-diet meal resets the running streak.
    """
    best = 0
    current = 0
    for on_diet in flags:
        if on_diet:
            current += 1
        else:
            current = 0
        if current > best:
            best = current
    return best
