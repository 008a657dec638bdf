"""Advanced example with a seeded random source and plot output.

This example demonstrates:
- Reproducible terrain from a fixed seed
- Stronger relief from more fault iterations
- Overview plots, a shaded surface render and pipeline metadata
"""
import numpy as np
import fault_terrain as ft


def main():
    """Generate a reproducible terrain and write diagnostics."""

    output_dir = "./terrain_output_advanced"

    terrain_config = ft.TerrainConfig(
        div=200,
        min_x=-2.0,
        max_x=2.0,
        min_y=-2.0,
        max_y=2.0
    )

    # More iterations with a smaller step give finer relief
    fault_config = ft.FaultConfig(
        iterations=1000,
        delta=0.002
    )

    viz_config = ft.VisualizationConfig(
        create_plots=True,
        show_wireframe=False,
        render_3d=True,
        plot_format="png",
        dpi=150
    )

    pipeline = ft.TerrainPipeline(rng=np.random.default_rng(42))
    terrain = pipeline.run(
        terrain_config=terrain_config,
        fault_config=fault_config,
        visualization_config=viz_config,
        output_dir=output_dir,
        save_metadata=True
    )

    mesh = terrain.to_pyvista()
    print(f"\n✓ Advanced terrain generated successfully!")
    print(f"  Surface: {mesh.n_points} points, {mesh.n_cells} triangles")
    print(f"  Outputs: {output_dir}")


if __name__ == "__main__":
    main()
