"""Main pipeline orchestrating terrain generation"""

from pathlib import Path
from typing import Union, Optional

from .config import TerrainConfig, FaultConfig, VisualizationConfig
from .grid_generator import GridGenerator
from .fault_generator import FaultLineGenerator, RandomSource
from .connectivity import build_faces, build_edges
from .normals import NormalEstimator
from .terrain import Terrain
from .utils import find_z_extents, write_metadata
from .visualizer import TerrainVisualizer


class TerrainPipeline:
    """Run the generation stages in order: grid, faults, extents, faces, normals, edges"""

    def __init__(self, rng: Optional[RandomSource] = None):
        self.rng = rng
        self.generator = GridGenerator()
        self.normal_estimator = NormalEstimator()

    def run(self,
            terrain_config: TerrainConfig,
            fault_config: Optional[FaultConfig] = None,
            visualization_config: Optional[VisualizationConfig] = None,
            output_dir: Optional[Union[str, Path]] = None,
            save_metadata: bool = False) -> Terrain:
        """Generate one terrain. Plots and metadata are written only with an output_dir."""

        fault_config = fault_config or FaultConfig()
        visualization_config = visualization_config or VisualizationConfig()

        print("=" * 60)
        print("Running Fault-Line Terrain Generation Pipeline")
        print("=" * 60)

        # Step 1: Vertex grid
        print("\n[1/6] Building vertex grid...")
        vertices = self.generator.create_vertices(terrain_config)
        normals = self.generator.create_normal_accumulators(len(vertices))

        # Step 2: Heights
        print("\n[2/6] Applying fault lines...")
        fault_generator = FaultLineGenerator(fault_config, rng=self.rng)
        fault_generator.apply(vertices, terrain_config)

        # Step 3: Extents
        print("\n[3/6] Finding elevation extents...")
        min_z, max_z = find_z_extents(vertices)
        print(f"Elevation range: [{min_z:.4f}, {max_z:.4f}]")

        # Step 4: Faces
        print("\n[4/6] Building triangles...")
        faces = build_faces(terrain_config.div)
        print(f"Generated {len(faces)} triangles")

        # Step 5: Normals
        print("\n[5/6] Estimating vertex normals...")
        self.normal_estimator.estimate(vertices, faces, normals)

        # Step 6: Edges
        print("\n[6/6] Building wireframe edges...")
        edges = build_edges(faces)
        print(f"Generated {len(edges) // 2} edges")

        terrain = Terrain(
            config=terrain_config,
            vertices=vertices,
            faces=faces,
            normals=normals,
            edges=edges,
            min_z=min_z,
            max_z=max_z
        )

        if output_dir is not None:
            output_dir = Path(output_dir)
            output_dir.mkdir(parents=True, exist_ok=True)
            print(f"\nOutput directory: {output_dir}")

            if visualization_config.create_plots:
                print("Creating visualization plots...")
                visualizer = TerrainVisualizer(visualization_config)
                visualizer.create_overview_plots(terrain, output_dir)
                if visualization_config.render_3d:
                    visualizer.render_surface(terrain, output_dir)
                print("  ✓ Visualization plots created")

            if save_metadata:
                metadata_path = output_dir / 'pipeline_metadata.json'
                write_metadata(metadata_path, terrain, fault_config, self.__class__.__name__)
                print(f"  ✓ Metadata saved to: {metadata_path}")

        print("\n" + "=" * 60)
        print("Pipeline completed successfully!")
        print("=" * 60)

        return terrain
