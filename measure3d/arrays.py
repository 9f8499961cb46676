# measure3d/arrays.py
from __future__ import annotations
from typing import Optional

import numpy as np
from numpy.typing import ArrayLike
from scipy.spatial.distance import cdist


def _as_points(a: ArrayLike, name: str) -> np.ndarray:
    arr = np.asarray(a, dtype=float)
    if arr.ndim == 0 or arr.shape[-1] != 3:
        raise ValueError(f"{name}: expected shape (..., 3), got {arr.shape}")
    return arr


def norms(v: ArrayLike) -> np.ndarray:
    """Довжини векторів уздовж останньої осі."""
    arr = _as_points(v, "v")
    return np.sqrt(np.einsum("...i,...i->...", arr, arr))


def distances(p: ArrayLike, q: ArrayLike) -> np.ndarray:
    """Поелементні відстані між p і q (з broadcast-ом)."""
    return norms(_as_points(p, "p") - _as_points(q, "q"))


def angles(head0: ArrayLike, head1: ArrayLike, vertex: ArrayLike) -> np.ndarray:
    """
    Векторна версія geom.angle.
    Нульові промені дають nan без RuntimeWarning від numpy.
    """
    v = _as_points(vertex, "vertex")
    a = _as_points(head0, "head0") - v
    b = _as_points(head1, "head1") - v
    dots = np.einsum("...i,...i->...", a, b)
    with np.errstate(divide="ignore", invalid="ignore"):
        cos_t = dots / (norms(a) * norms(b))
        # clip зберігає nan
        return np.arccos(np.clip(cos_t, -1.0, 1.0))


def pairwise_distances(points: ArrayLike, others: Optional[ArrayLike] = None) -> np.ndarray:
    """
    Матриця відстаней (N, M) між точками points (N, 3) та others (M, 3).
    Без others — (N, N) для самого набору.
    """
    a = np.atleast_2d(_as_points(points, "points"))
    b = a if others is None else np.atleast_2d(_as_points(others, "others"))
    if a.ndim != 2 or b.ndim != 2:
        raise ValueError("pairwise_distances expects flat lists of points")
    return cdist(a, b, metric="euclidean")
