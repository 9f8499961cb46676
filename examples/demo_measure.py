# examples/demo_measure.py
from measure3d import ResultsTable, record_angle, record_distance, setup_logging

if __name__ == "__main__":
    setup_logging()
    table = ResultsTable()

    # дві точки + вершина на кожному «зображенні»
    landmarks = {
        "femur_01.tif": ((0, 0, 0), (3, 4, 0), (0, 0, 5)),
        "femur_02.tif": ((1, 1, 1), (1, 1, 4), (5, 1, 1)),
    }
    for title, (v, a, b) in landmarks.items():
        record_distance(table, title, a, b, column="Length")
        record_angle(table, title, a, b, v, column="Angle (deg)", degrees=True)

    # повторне вимірювання — новий рядок для femur_01.tif
    record_distance(table, "femur_01.tif", (0, 0, 0), (1, 2, 2), column="Length")

    print(table.to_csv())
