"""
Generate a terrain from config and write its overview plots.

Usage:
    python mesh_visualizer.py terrain_config.yaml --seed 42 --output output_dir
"""

import argparse
from pathlib import Path

import fault_terrain as ft


def visualize_terrain(config_path, output_dir, seed=None, div=None, iterations=None,
                      render_3d=False, dump=False):
    """Run the pipeline with command-line overrides applied to the YAML config"""

    configs = ft.load_config(config_path)
    terrain_config = configs["terrain_config"]
    fault_config = configs["fault_config"]
    visualization_config = configs["visualization_config"]

    if div is not None:
        terrain_config = ft.TerrainConfig(
            div=div,
            min_x=terrain_config.min_x,
            max_x=terrain_config.max_x,
            min_y=terrain_config.min_y,
            max_y=terrain_config.max_y,
        )
    if iterations is not None:
        fault_config = ft.FaultConfig(
            iterations=iterations, delta=fault_config.delta, seed=fault_config.seed
        )
    if seed is not None:
        fault_config.seed = seed

    visualization_config.create_plots = True
    visualization_config.render_3d = render_3d

    pipeline = ft.TerrainPipeline()
    terrain = pipeline.run(
        terrain_config=terrain_config,
        fault_config=fault_config,
        visualization_config=visualization_config,
        output_dir=output_dir,
        save_metadata=True,
    )

    if dump:
        terrain.print_buffers()

    print(f"\nTerrain summary:")
    print(f"  Vertices:  {terrain.n_vertices}")
    print(f"  Triangles: {terrain.n_faces}")
    print(f"  Edges:     {terrain.n_edges}")
    print(f"  Z range:   [{terrain.min_z:.4f}, {terrain.max_z:.4f}]")
    return terrain


def main():
    parser = argparse.ArgumentParser(
        description="Generate a fault-line terrain from config and plot it"
    )
    parser.add_argument("config", help="Path to terrain_config.yaml")
    parser.add_argument(
        "--output",
        default="terrain_output",
        help="Output directory for plots (default: terrain_output)",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--div", type=int, default=None, help="Override grid resolution")
    parser.add_argument(
        "--iterations", type=int, default=None, help="Override fault iteration count"
    )
    parser.add_argument(
        "--render-3d", action="store_true", help="Also save an off-screen shaded render"
    )
    parser.add_argument(
        "--dump", action="store_true", help="Print vertex and face buffers"
    )

    args = parser.parse_args()

    if not Path(args.config).exists():
        print(f"Error: Config file not found: {args.config}")
        return

    visualize_terrain(
        args.config,
        args.output,
        seed=args.seed,
        div=args.div,
        iterations=args.iterations,
        render_3d=args.render_3d,
        dump=args.dump,
    )


if __name__ == "__main__":
    main()
