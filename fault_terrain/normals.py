"""Per-vertex normal estimation"""

import numpy as np
from typing import Optional


class NormalEstimator:
    """Area-weighted vertex normals for smooth shading"""

    def __init__(self):
        self.degenerate_count = 0

    def face_normals(self, vertices: np.ndarray, faces: np.ndarray) -> np.ndarray:
        """Unnormalized cross(v1 - v0, v2 - v0) for every face"""
        faces = np.asarray(faces, dtype=np.intp)
        v0 = vertices[faces[:, 0]]
        v1 = vertices[faces[:, 1]]
        v2 = vertices[faces[:, 2]]
        return np.cross(v1 - v0, v2 - v0)

    def estimate(self, vertices: np.ndarray, faces: np.ndarray,
                 normals: Optional[np.ndarray] = None) -> np.ndarray:
        """
        Compute unit vertex normals.

        Face normals are summed into each of their three vertices without
        normalizing first, so larger faces weigh more. The accumulators are
        zeroed at the start of every call. Vertices whose sum is exactly zero
        keep a zero normal.

        Parameters:
        -----------
        vertices : np.ndarray
            (n_vertices, 3) positions
        faces : np.ndarray
            (n_faces, 3) vertex indices
        normals : np.ndarray, optional
            (n_vertices, 3) float accumulator array filled in place. A new
            one is allocated when omitted.

        Returns:
        --------
        np.ndarray
            (n_vertices, 3) unit normals, the same array as ``normals`` when given
        """
        faces = np.asarray(faces, dtype=np.intp)
        face_normals = self.face_normals(vertices, faces)

        if normals is None:
            normals = np.zeros_like(vertices, dtype=np.float64)
        elif normals.shape != vertices.shape:
            raise ValueError(
                f"normals must have shape {vertices.shape}, got {normals.shape}"
            )
        else:
            normals[:] = 0.0

        for k in range(3):
            np.add.at(normals, faces[:, k], face_normals)

        lengths = np.linalg.norm(normals, axis=1)
        valid = lengths > 0
        normals[valid] /= lengths[valid, np.newaxis]

        self.degenerate_count = int(np.count_nonzero(~valid))
        if self.degenerate_count > 0:
            print(f"Warning: {self.degenerate_count} vertices have a zero normal")

        return normals
