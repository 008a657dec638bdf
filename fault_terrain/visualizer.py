"""Visualization tools for generated terrain"""

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.collections import LineCollection
from matplotlib.tri import Triangulation
import pyvista as pv
from pathlib import Path
from typing import Optional

from .config import VisualizationConfig
from .terrain import Terrain


class TerrainVisualizer:
    """Handle visualization of generated terrain"""

    def __init__(self, config: Optional[VisualizationConfig] = None):
        self.config = config or VisualizationConfig()

    def hillshade(self, terrain: Terrain, light_dir=(-1.0, 1.0, 1.0)) -> np.ndarray:
        """Lambertian shade per vertex from the vertex normals"""
        light = np.asarray(light_dir, dtype=np.float64)
        light = light / np.linalg.norm(light)
        return np.clip(terrain.normals @ light, 0.0, 1.0)

    def create_overview_plots(self, terrain: Terrain, output_dir: Path) -> Optional[Path]:
        """Elevation, shading, wireframe and height distribution in one figure"""

        if not self.config.create_plots:
            return None

        print("Creating terrain overview...")

        x = terrain.vertices[:, 0]
        y = terrain.vertices[:, 1]
        z = terrain.vertices[:, 2]
        triangulation = Triangulation(x, y, np.asarray(terrain.faces, dtype=np.int64))

        fig, axes = plt.subplots(2, 2, figsize=(16, 12))
        fig.suptitle(f'Fault-Line Terrain ({terrain.div} x {terrain.div} cells)', fontsize=16)

        # 1. Elevation
        ax = axes[0, 0]
        im1 = ax.tripcolor(triangulation, z, cmap='terrain', shading='gouraud',
                           vmin=terrain.min_z, vmax=terrain.max_z)
        ax.set_title('Elevation')
        ax.set_aspect('equal')
        plt.colorbar(im1, ax=ax, label='z')

        # 2. Shading from vertex normals
        ax = axes[0, 1]
        im2 = ax.tripcolor(triangulation, self.hillshade(terrain), cmap='gray',
                           shading='gouraud', vmin=0.0, vmax=1.0)
        ax.set_title('Hill Shade (Vertex Normals)')
        ax.set_aspect('equal')
        plt.colorbar(im2, ax=ax, label='Intensity')

        # 3. Wireframe from the edge buffer
        ax = axes[1, 0]
        if self.config.show_wireframe:
            segments = terrain.vertices[:, :2][terrain.edges.reshape(-1, 2).astype(np.intp)]
            ax.add_collection(LineCollection(segments, colors='k', linewidths=0.3))
            ax.set_xlim(terrain.config.min_x, terrain.config.max_x)
            ax.set_ylim(terrain.config.min_y, terrain.config.max_y)
            ax.set_title(f'Wireframe ({terrain.n_edges} edges)')
            ax.set_aspect('equal')
        else:
            ax.text(0.5, 0.5, 'Wireframe disabled', ha='center', va='center',
                    transform=ax.transAxes, fontsize=12)
            ax.axis('off')

        # 4. Height distribution
        ax = axes[1, 1]
        ax.hist(z, bins=50, color='saddlebrown', alpha=0.8)
        ax.set_title('Height Distribution')
        ax.set_xlabel('z')
        ax.set_ylabel('Vertices')

        stats_text = f"Min: {terrain.min_z:.4f}\n"
        stats_text += f"Max: {terrain.max_z:.4f}\n"
        stats_text += f"Mean: {z.mean():.4f}"
        ax.text(0.02, 0.98, stats_text, transform=ax.transAxes, fontsize=9,
                verticalalignment='top', bbox=dict(boxstyle='round', facecolor='white', alpha=0.8))

        plt.tight_layout()

        output_path = Path(output_dir) / f'terrain_overview.{self.config.plot_format}'
        plt.savefig(output_path, dpi=self.config.dpi, bbox_inches='tight')
        plt.close(fig)

        print(f"Terrain overview saved: {output_path}")
        return output_path

    def render_surface(self, terrain: Terrain, output_dir: Path) -> Path:
        """Off-screen shaded render of the surface"""

        print("Rendering terrain surface...")

        mesh = terrain.to_pyvista()
        plotter = pv.Plotter(off_screen=True)
        plotter.add_mesh(mesh, scalars='elevation', cmap='terrain', smooth_shading=True)
        plotter.view_isometric()

        output_path = Path(output_dir) / f'terrain_surface.{self.config.plot_format}'
        plotter.screenshot(str(output_path))
        plotter.close()

        print(f"Surface render saved: {output_path}")
        return output_path
