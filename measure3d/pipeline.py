from __future__ import annotations
from math import degrees as _to_degrees
from typing import Dict, Mapping

from .geom import PtLike, distance, angle
from .results import set_result_in_row
from .table import MeasurementTable


def record_measurements(table: MeasurementTable, label: str, values: Mapping[str, float]) -> Dict[str, int]:
    """
    Записати набір вимірювань одного зображення (column -> value).
    Повертає column -> індекс рядка.
    """
    return {column: set_result_in_row(table, label, column, value) for column, value in values.items()}


def record_distance(
    table: MeasurementTable,
    label: str,
    p: PtLike,
    q: PtLike,
    column: str = "Distance",
) -> float:
    """Відстань p-q, записана в колонку column рядка label."""
    d = distance(p, q)
    record_measurements(table, label, {column: d})
    return d


def record_angle(
    table: MeasurementTable,
    label: str,
    head0: PtLike,
    head1: PtLike,
    vertex: PtLike,
    column: str = "Angle",
    degrees: bool = False,
) -> float:
    """
    Кут head0-vertex-head1 (радіани або градуси).
    nan для виродженого променя теж записується: він не дорівнює SENTINEL.
    """
    theta = angle(head0, head1, vertex)
    if degrees:
        theta = _to_degrees(theta)
    record_measurements(table, label, {column: theta})
    return theta
