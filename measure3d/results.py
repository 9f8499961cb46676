# measure3d/results.py
from __future__ import annotations
import logging
from math import isnan
from typing import Dict, Mapping

from .table import MeasurementTable, SENTINEL

logger = logging.getLogger(__name__)


def set_result_in_row(table: MeasurementTable, label: str, column: str, value: float) -> int:
    """
    Записати value у таблицю так, щоб кожне зображення мало свій рядок:
      - вимірювання різних типів (колонок) лягають в один рядок;
      - повторне вимірювання того ж типу для тієї ж мітки йде в новий рядок.

    Шукаємо перший рядок із міткою label, у якому колонка ще має SENTINEL.
    Якщо такого немає — дописуємо рядок у кінець таблиці (row_count()),
    а не в рядок 0. Повертає індекс рядка, куди записано значення.
    """
    if not isinstance(label, str):
        raise TypeError(f"label must be str, got {type(label).__name__}")
    if not isinstance(column, str):
        raise TypeError(f"column must be str, got {type(column).__name__}")
    value = float(value)
    if isnan(value):
        logger.warning("%s: %s is NaN (degenerate geometry?)", label, column)

    for row in range(table.row_count()):
        if table.label_at(row) == label:
            if table.value_at(column, row) == SENTINEL:
                table.set_value(column, row, value)
                logger.debug("%s: %s=%r -> row %d", label, column, value, row)
                return row

    # дійшли до кінця таблиці без вільного місця — новий рядок
    row = table.row_count()
    table.append_row()
    table.set_label(label, row)
    table.set_value(column, row, value)
    logger.debug("%s: %s=%r -> new row %d", label, column, value, row)
    return row


class ResultRowAggregator:
    """
    Обгортка над set_result_in_row для однієї таблиці.
    Таблицю передають явно (жодного глобального синглтона).
    """

    def __init__(self, table: MeasurementTable):
        self.table = table

    def insert(self, label: str, column: str, value: float) -> int:
        return set_result_in_row(self.table, label, column, value)

    def insert_many(self, label: str, values: Mapping[str, float]) -> Dict[str, int]:
        """Кілька вимірювань одного зображення; column -> індекс рядка."""
        return {column: self.insert(label, column, v) for column, v in values.items()}
