"""Fault-line height synthesis"""

import numpy as np
from typing import Optional, Protocol

from .config import FaultConfig, TerrainConfig


class RandomSource(Protocol):
    """Anything with a random() method returning a float in [0, 1)"""

    def random(self) -> float:
        ...


class FaultLineGenerator:
    """Raise and lower the terrain along random fault lines"""

    def __init__(self, config: Optional[FaultConfig] = None,
                 rng: Optional[RandomSource] = None):
        self.config = config or FaultConfig()
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)

    def draw_fault(self, terrain_config: TerrainConfig):
        """
        Draw one fault line.

        The point is uniform over the domain rectangle and the direction is a
        unit vector at a uniform angle. Draw order is px, py, angle.

        Returns:
        --------
        tuple of np.ndarray
            (point, direction), both of shape (2,)
        """
        px = terrain_config.min_x + (terrain_config.max_x - terrain_config.min_x) * self.rng.random()
        py = terrain_config.min_y + (terrain_config.max_y - terrain_config.min_y) * self.rng.random()
        theta = 2.0 * np.pi * self.rng.random()

        point = np.array([px, py])
        direction = np.array([np.cos(theta), np.sin(theta)])
        return point, direction

    def apply_fault(self, vertices: np.ndarray, point: np.ndarray,
                    direction: np.ndarray) -> None:
        """Move every vertex on the positive side up by delta, the rest down"""
        delta = self.config.delta
        side = (vertices[:, :2] - point) @ direction
        vertices[:, 2] += np.where(side > 0, delta, -delta)

    def apply(self, vertices: np.ndarray, terrain_config: TerrainConfig) -> np.ndarray:
        """
        Run all fault iterations on the vertex heights in place.

        Parameters:
        -----------
        vertices : np.ndarray
            (n_vertices, 3) array owned by the caller; only column z changes
        terrain_config : TerrainConfig
            Domain the fault points are drawn from

        Returns:
        --------
        np.ndarray
            The z column of ``vertices``
        """
        iterations = self.config.iterations
        if iterations == 0:
            print("No fault iterations requested, terrain stays flat")
            return vertices[:, 2]

        for _ in range(iterations):
            point, direction = self.draw_fault(terrain_config)
            self.apply_fault(vertices, point, direction)

        print(f"Applied {iterations} fault lines (delta={self.config.delta})")
        return vertices[:, 2]
