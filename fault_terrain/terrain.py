"""Terrain mesh produced by the generation pipeline"""

from dataclasses import dataclass
from typing import Tuple
import numpy as np
import pyvista as pv

from .config import TerrainConfig
from .grid_generator import vertex_index


@dataclass
class Terrain:
    """One generated terrain instance. Arrays are read-only once built."""

    config: TerrainConfig
    vertices: np.ndarray
    faces: np.ndarray
    normals: np.ndarray
    edges: np.ndarray
    min_z: float
    max_z: float

    def __post_init__(self):
        for array in (self.vertices, self.faces, self.normals, self.edges):
            array.flags.writeable = False

    @property
    def div(self) -> int:
        return self.config.div

    @property
    def n_vertices(self) -> int:
        return len(self.vertices)

    @property
    def n_faces(self) -> int:
        return len(self.faces)

    @property
    def n_edges(self) -> int:
        return len(self.edges) // 2

    def get_vertex(self, i: int, j: int) -> Tuple[float, float, float]:
        """x, y, z of the vertex at grid row i, column j"""
        if not (0 <= i <= self.div and 0 <= j <= self.div):
            raise IndexError(f"Grid location ({i}, {j}) outside 0..{self.div}")
        x, y, z = self.vertices[vertex_index(i, j, self.div)]
        return float(x), float(y), float(z)

    # Flat buffers in the layout a renderer uploads directly

    @property
    def position_buffer(self) -> np.ndarray:
        return self.vertices.astype(np.float32).ravel()

    @property
    def normal_buffer(self) -> np.ndarray:
        return self.normals.astype(np.float32).ravel()

    @property
    def face_buffer(self) -> np.ndarray:
        return self.faces.astype(np.uint32).ravel()

    @property
    def edge_buffer(self) -> np.ndarray:
        return self.edges.astype(np.uint32)

    def print_buffers(self):
        """Print vertices and triangles for debugging"""
        for x, y, z in self.vertices:
            print(f"v {x} {y} {z}")
        for a, b, c in self.faces:
            print(f"f {a} {b} {c}")

    def to_pyvista(self) -> pv.PolyData:
        """Triangle surface with normals and elevation as point data"""
        n_faces = self.n_faces
        cells = np.empty((n_faces, 4), dtype=np.int64)
        cells[:, 0] = 3
        cells[:, 1:] = self.faces

        mesh = pv.PolyData(np.array(self.vertices), cells.ravel())
        mesh.point_data['normals'] = np.array(self.normals)
        mesh.point_data['elevation'] = np.array(self.vertices[:, 2])
        return mesh
