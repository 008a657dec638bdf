import numpy as np

from .config import TerrainConfig


def vertex_index(i: int, j: int, div: int) -> int:
    """Row-major linear index of the vertex at grid row i, column j"""
    return i * (div + 1) + j


class GridGenerator:
    """Generate the regular vertex lattice the terrain is built on"""

    def create_vertices(self, config: TerrainConfig) -> np.ndarray:
        """
        Lay out (div+1) x (div+1) vertices evenly over the domain.

        Parameters:
        -----------
        config : TerrainConfig
            Resolution and domain bounds

        Returns:
        --------
        np.ndarray
            (n_vertices, 3) array of x, y, z. Row i runs along Y, column j
            along X, and every z starts at 0.
        """
        n = config.div + 1

        x_coords = config.min_x + config.dx * np.arange(n)
        y_coords = config.min_y + config.dy * np.arange(n)

        # meshgrid's default 'xy' indexing gives X[i, j] = x_j, Y[i, j] = y_i
        X, Y = np.meshgrid(x_coords, y_coords)

        vertices = np.zeros((n * n, 3), dtype=np.float64)
        vertices[:, 0] = X.ravel()
        vertices[:, 1] = Y.ravel()

        print(f"Grid: {n} x {n} vertices, spacing dX={config.dx:.4g}, dY={config.dy:.4g}")
        return vertices

    def create_normal_accumulators(self, n_vertices: int) -> np.ndarray:
        """Zeroed per-vertex normal accumulators"""
        return np.zeros((n_vertices, 3), dtype=np.float64)
