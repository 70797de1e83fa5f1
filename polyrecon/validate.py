import math
from typing import List

from .types import PolygonDescriptor


class ValidationError(Exception):
    pass


def descriptor_problems(descriptor: PolygonDescriptor) -> List[str]:
    """Return every structural rule ``descriptor`` breaks (empty if none)."""

    problems: List[str] = []
    n = len(descriptor.sides)
    expect = max(n - 3, 0)
    if len(descriptor.angles) != expect:
        problems.append(f'{n} side(s) need exactly {expect} angle(s), got {len(descriptor.angles)}')
    for idx, angle in enumerate(descriptor.angles):
        if not math.isfinite(angle):
            problems.append(f'angle {idx} is not finite ({angle!r})')
    for idx, side in enumerate(descriptor.sides):
        if not math.isfinite(side):
            problems.append(f'side {idx} is not finite ({side!r})')
        elif side < 0:
            problems.append(f'side {idx} is negative ({side!r})')
    return problems


def is_valid(descriptor: PolygonDescriptor) -> bool:
    return not descriptor_problems(descriptor)


def validate(descriptor: PolygonDescriptor) -> None:
    problems = descriptor_problems(descriptor)
    if problems:
        raise ValidationError(problems[0])
