"""Configuration classes for fault-line terrain generation"""

from dataclasses import dataclass
import math
import numbers
from typing import Optional
from pathlib import Path
import yaml


class InvalidResolution(ValueError):
    """Grid resolution is not a positive integer"""


class InvalidDomain(ValueError):
    """Domain rectangle is empty or inverted"""


@dataclass
class TerrainConfig:
    """Configuration for the terrain grid and its rectangular domain"""

    div: int
    min_x: float
    max_x: float
    min_y: float
    max_y: float

    def __post_init__(self):
        if isinstance(self.div, bool) or not isinstance(self.div, numbers.Integral):
            raise InvalidResolution(f"div must be an integer, got {self.div!r}")
        if self.div < 1:
            raise InvalidResolution(f"div must be >= 1, got {self.div}")

        if not self.min_x < self.max_x:
            raise InvalidDomain(
                f"min_x must be smaller than max_x, got [{self.min_x}, {self.max_x}]"
            )
        if not self.min_y < self.max_y:
            raise InvalidDomain(
                f"min_y must be smaller than max_y, got [{self.min_y}, {self.max_y}]"
            )
        for name in ("min_x", "max_x", "min_y", "max_y"):
            if not math.isfinite(getattr(self, name)):
                raise InvalidDomain(f"{name} must be finite, got {getattr(self, name)}")

    @property
    def dx(self) -> float:
        return (self.max_x - self.min_x) / self.div

    @property
    def dy(self) -> float:
        return (self.max_y - self.min_y) / self.div

    @property
    def n_vertices(self) -> int:
        return (self.div + 1) ** 2

    @property
    def n_faces(self) -> int:
        return 2 * self.div * self.div


@dataclass
class FaultConfig:
    """Configuration for fault-line height perturbation"""

    iterations: int = 400
    delta: float = 0.004
    seed: Optional[int] = None

    def __post_init__(self):
        if isinstance(self.iterations, bool) or not isinstance(self.iterations, numbers.Integral):
            raise ValueError(f"iterations must be an integer, got {self.iterations!r}")
        if self.iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {self.iterations}")
        if self.delta < 0:
            raise ValueError(f"delta must be >= 0, got {self.delta}")


@dataclass
class VisualizationConfig:
    """Configuration for visualization options"""

    create_plots: bool = True
    show_wireframe: bool = True
    render_3d: bool = False
    plot_format: str = "png"
    dpi: int = 150


def load_config(config_path: str) -> dict:
    """
    Load configuration from YAML file.

    Returns:
        dict with terrain_config, fault_config and visualization_config
    """

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path, 'r') as f:
        config_dict = yaml.safe_load(f)

    terrain_config = TerrainConfig(**config_dict['terrain'])
    fault_config = FaultConfig(**(config_dict.get('fault') or {}))
    visualization_config = VisualizationConfig(**(config_dict.get('visualization') or {}))

    print(f"Loaded terrain configuration (div={terrain_config.div}, "
          f"{fault_config.iterations} fault iterations)")

    return {
        'terrain_config': terrain_config,
        'fault_config': fault_config,
        'visualization_config': visualization_config
    }
