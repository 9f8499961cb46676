from __future__ import annotations
from dataclasses import dataclass
from math import acos, nan, sqrt
from typing import Sequence, Union

EPS = 1e-10  # допуск для порівнянь у тестах/діагностиці

@dataclass(frozen=True)
class Pt:
    x: float
    y: float
    z: float
    def __iter__(self):
        yield self.x; yield self.y; yield self.z

PtLike = Union[Pt, Sequence[float]]

def to_pt(p: PtLike) -> Pt:
    """Pt або будь-яка послідовність із 3 чисел -> Pt."""
    if isinstance(p, Pt):
        return p
    coords = tuple(p)
    if len(coords) != 3:
        raise ValueError(f"Expected 3 coordinates, got {len(coords)}")
    x, y, z = coords
    return Pt(float(x), float(y), float(z))

def sub(a: Pt, b: Pt) -> Pt:
    return Pt(a.x - b.x, a.y - b.y, a.z - b.z)

def dot(a: Pt, b: Pt) -> float:
    return a.x*b.x + a.y*b.y + a.z*b.z

def norm(a: Pt) -> float:
    return sqrt(a.x*a.x + a.y*a.y + a.z*a.z)

def distance(p: PtLike, q: PtLike) -> float:
    """Евклідова відстань між p і q (теорема Піфагора)."""
    return norm(sub(to_pt(p), to_pt(q)))

def angle(head0: PtLike, head1: PtLike, vertex: PtLike) -> float:
    """
    Кут 0-V-1 (радіани, [0, pi]) між векторами vertex->head0 та vertex->head1.

    cos(theta) обрізається до [-1, 1]: через округлення частка може вийти
    трохи за межі, і acos тоді не визначений.
    Вироджений промінь (head == vertex) дає nan, винятків немає.
    """
    vertex = to_pt(vertex)
    a = sub(to_pt(head0), vertex)
    b = sub(to_pt(head1), vertex)
    da = norm(a)
    db = norm(b)
    denom = da * db
    if denom == 0.0:
        return nan
    cos_t = dot(a, b) / denom
    if cos_t < -1.0:
        cos_t = -1.0
    elif cos_t > 1.0:
        cos_t = 1.0
    return acos(cos_t)
