import numpy as np
import json
from datetime import datetime
from typing import Tuple


def find_z_extents(vertices: np.ndarray) -> Tuple[float, float]:
    """
    Minimum and maximum elevation over all vertices.

    Parameters:
    -----------
    vertices : np.ndarray
        (n_vertices, 3) array, must not be empty
    """
    z = vertices[:, 2]
    return float(z.min()), float(z.max())


def get_array_stats(data: np.ndarray) -> dict:
    """Helper to extract statistics from numpy array"""
    return {
        "shape": list(data.shape),
        "min": float(np.nanmin(data)),
        "max": float(np.nanmax(data)),
        "mean": float(np.nanmean(data)),
        "std": float(np.nanstd(data))
    }


def write_metadata(metadata_path, terrain, fault_config, pipeline_class: str):
    """Save pipeline metadata to JSON file"""

    config = terrain.config
    metadata = {
        "pipeline_info": {
            "timestamp": datetime.now().isoformat(),
            "pipeline_class": pipeline_class
        },

        "configurations": {
            "terrain": {
                "div": config.div,
                "min_x": config.min_x,
                "max_x": config.max_x,
                "min_y": config.min_y,
                "max_y": config.max_y
            },

            "fault": {
                "iterations": fault_config.iterations,
                "delta": fault_config.delta,
                "seed": fault_config.seed
            }
        },

        "processing_results": {
            "mesh_statistics": {
                "number_of_vertices": terrain.n_vertices,
                "number_of_faces": terrain.n_faces,
                "number_of_edges": terrain.n_edges
            },

            "elevation_statistics": {
                "min_z": terrain.min_z,
                "max_z": terrain.max_z,
                "heights": get_array_stats(terrain.vertices[:, 2])
            }
        }
    }

    with open(metadata_path, 'w') as f:
        json.dump(metadata, f, indent=2, default=str)
