# measure3d/table.py
from __future__ import annotations
import logging
from typing import Dict, List, Optional, Protocol, runtime_checkable

import pandas as pd

logger = logging.getLogger(__name__)

SENTINEL = 0.0  # значення, яке читає ще не записана клітинка


@runtime_checkable
class MeasurementTable(Protocol):
    """
    Мінімальний контракт таблиці результатів, якою володіє хост.
    value_at повертає SENTINEL для клітинки, у яку ще нічого не писали.
    """
    def row_count(self) -> int: ...
    def label_at(self, row: int) -> Optional[str]: ...
    def value_at(self, column: str, row: int) -> float: ...
    def set_value(self, column: str, row: int, value: float) -> None: ...
    def set_label(self, label: str, row: int) -> None: ...
    def append_row(self) -> None: ...


class ResultsTable:
    """
    Таблиця результатів у пам'яті:
      - labels[i]: мітка рядка i (не обов'язково унікальна);
      - cells[i]: column -> value лише для записаних клітинок;
      - columns: назви колонок у порядку створення.
    Незаписана клітинка читається як SENTINEL, але has_value відрізняє її
    від справжнього 0.0.
    """

    def __init__(self) -> None:
        self.labels: List[Optional[str]] = []
        self.cells: List[Dict[str, float]] = []
        self.columns: List[str] = []

    # ---------------- MeasurementTable ----------------
    def row_count(self) -> int:
        return len(self.cells)

    def label_at(self, row: int) -> Optional[str]:
        return self.labels[self._check_row(row)]

    def value_at(self, column: str, row: int) -> float:
        return self.cells[self._check_row(row)].get(column, SENTINEL)

    def set_value(self, column: str, row: int, value: float) -> None:
        row = self._check_row(row)
        if column not in self.columns:
            logger.debug("New column %r", column)
            self.columns.append(column)
        self.cells[row][column] = float(value)

    def set_label(self, label: str, row: int) -> None:
        self.labels[self._check_row(row)] = label

    def append_row(self) -> None:
        self.labels.append(None)
        self.cells.append({})

    # ---------------- Доступ ----------------
    def __len__(self) -> int:
        return self.row_count()

    def has_value(self, column: str, row: int) -> bool:
        return column in self.cells[self._check_row(row)]

    def row(self, row: int) -> Dict[str, float]:
        """Усі колонки рядка (незаписані = SENTINEL)."""
        cells = self.cells[self._check_row(row)]
        return {c: cells.get(c, SENTINEL) for c in self.columns}

    def column(self, name: str) -> List[float]:
        return [cells.get(name, SENTINEL) for cells in self.cells]

    def _check_row(self, row: int) -> int:
        if not 0 <= row < len(self.cells):
            raise IndexError(f"Row {row} out of range (0..{len(self.cells) - 1})")
        return row

    # ---------------- Експорт ----------------
    def to_dataframe(self) -> pd.DataFrame:
        """
        DataFrame: колонка Label + колонки вимірювань, індекс рядків 1-based
        (як у таблицях результатів ImageJ). Незаписані клітинки = SENTINEL.
        """
        df = pd.DataFrame(
            {"Label": [label or "" for label in self.labels],
             **{c: self.column(c) for c in self.columns}},
            index=pd.RangeIndex(1, self.row_count() + 1, name=" "),
        )
        return df

    def to_csv(self, sep: str = ",") -> str:
        """Текстовий експорт; мітки з роздільником/лапками беруться в лапки."""
        return self.to_dataframe().to_csv(sep=sep, na_rep="NaN", lineterminator="\n")

    def write_csv(self, path: str, sep: str = ",") -> None:
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_csv(sep))
        logger.info("Wrote %d rows to %s", self.row_count(), path)
