"""
Tests for measure-and-record helpers and logging setup.
"""

import logging
from math import isnan, pi

import pytest

from measure3d import (
    ResultsTable,
    record_angle,
    record_distance,
    record_measurements,
    setup_logging,
)


@pytest.fixture
def table():
    return ResultsTable()


class TestPipeline:
    """Geometry results land in the table via the aggregator."""

    def test_distance_and_angle_share_row(self, table):
        d = record_distance(table, "img1", (0, 0, 0), (3, 4, 0))
        theta = record_angle(table, "img1", (1, 0, 0), (0, 1, 0), (0, 0, 0))
        assert d == 5.0
        assert theta == pytest.approx(pi / 2)
        assert table.row_count() == 1
        assert table.row(0) == {"Distance": 5.0, "Angle": theta}

    def test_repeat_goes_to_new_row(self, table):
        record_distance(table, "img1", (0, 0, 0), (3, 4, 0), column="Length")
        record_distance(table, "img1", (0, 0, 0), (1, 2, 2), column="Length")
        assert table.column("Length") == [5.0, 3.0]
        assert [table.label_at(r) for r in range(2)] == ["img1", "img1"]

    def test_angle_degrees(self, table):
        theta = record_angle(table, "img1", (1, 0, 0), (-1, 0, 0), (0, 0, 0), degrees=True)
        assert theta == pytest.approx(180.0)
        assert table.value_at("Angle", 0) == pytest.approx(180.0)

    def test_nan_recorded_and_logged(self, table, caplog):
        with caplog.at_level(logging.WARNING, logger="measure3d"):
            theta = record_angle(table, "img1", (0, 0, 0), (1, 0, 0), (0, 0, 0))
        assert isnan(theta)
        assert isnan(table.value_at("Angle", 0))
        assert "NaN" in caplog.text
        # nan is not the sentinel, so the next angle opens a new row
        record_angle(table, "img1", (1, 0, 0), (2, 0, 0), (0, 0, 0))
        assert table.row_count() == 2

    def test_record_measurements(self, table):
        rows = record_measurements(table, "img1", {"A": 1.0, "B": 2.0})
        assert rows == {"A": 0, "B": 0}
        rows = record_measurements(table, "img2", {"A": 3.0})
        assert rows == {"A": 1}


class TestLogging:
    """setup_logging configures the package logger."""

    def test_handlers_not_duplicated(self):
        logger = setup_logging(logging.DEBUG)
        setup_logging(logging.DEBUG)
        assert logger.name == "measure3d"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 1
        logger.handlers.clear()

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "measure3d.log"
        logger = setup_logging(logging.INFO, log_file=str(log_file))
        assert len(logger.handlers) == 2
        logging.getLogger("measure3d.results").info("hello")
        for h in logger.handlers:
            h.flush()
        assert "measure3d.results - INFO - hello" in log_file.read_text(encoding="utf-8")
        for h in logger.handlers:
            h.close()
        logger.handlers.clear()


class TestValueConversion:
    """Values go through float() before recording."""

    def test_numeric_string(self, table):
        assert record_measurements(table, "img1", {"A": 1.0, "B": "2.5"}) == {"A": 0, "B": 0}
        assert table.value_at("B", 0) == 2.5

    def test_nan_string_logged(self, table, caplog):
        with caplog.at_level(logging.WARNING, logger="measure3d"):
            record_measurements(table, "img1", {"A": "nan"})
        assert isnan(table.value_at("A", 0))
        assert "NaN" in caplog.text
