"""
measure3d — 3D-відстані та кути для вимірювань на зображеннях
і запис результатів у таблицю: один рядок на зображення.
"""

__version__ = "0.1.0"

from measure3d.geom import Pt, EPS, to_pt, sub, dot, norm, distance, angle
from measure3d.table import MeasurementTable, ResultsTable, SENTINEL
from measure3d.results import ResultRowAggregator, set_result_in_row
from measure3d.pipeline import record_measurements, record_distance, record_angle
from measure3d.logging_config import setup_logging

__all__ = [
    "Pt", "EPS", "to_pt", "sub", "dot", "norm", "distance", "angle",
    "MeasurementTable", "ResultsTable", "SENTINEL",
    "ResultRowAggregator", "set_result_in_row",
    "record_measurements", "record_distance", "record_angle",
    "setup_logging", "__version__",
]
