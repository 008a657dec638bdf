"""Triangle and wireframe index buffers for the terrain grid"""

import numpy as np


def build_faces(div: int) -> np.ndarray:
    """
    Split every grid cell into two triangles.

    For cell (i, j) with corners a = i*(div+1) + j, b = a+1, c = a+div+1,
    d = c+1 the triangles are (a, b, c) then (b, d, c). Cells are visited
    row by row and the diagonal is always b-c.

    Returns:
    --------
    np.ndarray
        (2*div*div, 3) uint32 array of vertex indices
    """
    i, j = np.meshgrid(np.arange(div), np.arange(div), indexing='ij')
    a = (i * (div + 1) + j).ravel()
    b = a + 1
    c = a + div + 1
    d = c + 1

    faces = np.empty((a.size, 2, 3), dtype=np.uint32)
    faces[:, 0] = np.column_stack((a, b, c))
    faces[:, 1] = np.column_stack((b, d, c))
    return faces.reshape(-1, 3)


def build_edges(faces: np.ndarray) -> np.ndarray:
    """
    Line-list index buffer with the three sides of every face.

    Each face (v0, v1, v2) contributes v0 v1, v1 v2, v2 v0 in face order.
    Edges shared by two faces are listed twice.
    """
    faces = np.asarray(faces)
    return faces[:, [0, 1, 1, 2, 2, 0]].astype(np.uint32).ravel()
