"""Simple example demonstrating basic terrain generation.

This example shows the minimal code needed to generate a fault-line terrain
and hand its buffers to a renderer.
"""
import fault_terrain as ft


def main():
    """Generate a small terrain with default fault settings."""

    terrain_config = ft.TerrainConfig(
        div=64,
        min_x=-2.0,
        max_x=2.0,
        min_y=-2.0,
        max_y=2.0
    )

    pipeline = ft.TerrainPipeline()
    terrain = pipeline.run(terrain_config=terrain_config)

    print(f"\n✓ Terrain generated successfully!")
    print(f"  Vertices: {terrain.n_vertices}")
    print(f"  Triangles: {terrain.n_faces}")
    print(f"  Position buffer: {terrain.position_buffer.nbytes} bytes")
    print(f"  Elevation range: [{terrain.min_z:.4f}, {terrain.max_z:.4f}]")


if __name__ == "__main__":
    main()
