"""
Fault-Line Terrain Mesh Generation Package
"""
from .config import (
    TerrainConfig,
    FaultConfig,
    VisualizationConfig,
    InvalidResolution,
    InvalidDomain,
    load_config
)
from .grid_generator import GridGenerator, vertex_index
from .fault_generator import FaultLineGenerator
from .connectivity import build_faces, build_edges
from .normals import NormalEstimator
from .terrain import Terrain
from .pipeline import TerrainPipeline
from .utils import find_z_extents

__version__ = "1.0.0"


def generate_terrain(div: int, min_x: float, max_x: float, min_y: float, max_y: float,
                     iterations: int = 400, delta: float = 0.004, rng=None) -> Terrain:
    """Generate a terrain with default settings and no file output"""
    terrain_config = TerrainConfig(div=div, min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)
    fault_config = FaultConfig(iterations=iterations, delta=delta)
    return TerrainPipeline(rng=rng).run(terrain_config, fault_config)
