# examples/demo_batch.py
import numpy as np

from measure3d.arrays import angles, distances, pairwise_distances

if __name__ == "__main__":
    rng = np.random.default_rng(0)
    pts = rng.random((5, 3))
    vertex = np.zeros(3)

    print("|p - 0|:", distances(pts, vertex))
    print("angles at origin (rad):", angles(pts[:-1], pts[1:], vertex))
    print("pairwise:\n", pairwise_distances(pts).round(3))
