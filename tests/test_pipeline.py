"""End-to-end tests for terrain generation.

Covers the single-cell and 2x2 reference scenarios, the extents, read-only
buffers, the renderer-facing flat buffers and the optional outputs.
"""

import json
import numpy as np
import pytest
import fault_terrain as ft
from fault_terrain.config import TerrainConfig, FaultConfig, VisualizationConfig, load_config
from fault_terrain.grid_generator import GridGenerator
from fault_terrain.pipeline import TerrainPipeline
from fault_terrain.utils import find_z_extents


def run_pipeline(div, iterations=0, seed=7, bounds=(0.0, 1.0, 0.0, 1.0), **kwargs):
    min_x, max_x, min_y, max_y = bounds
    terrain_config = TerrainConfig(div=div, min_x=min_x, max_x=max_x, min_y=min_y, max_y=max_y)
    fault_config = FaultConfig(iterations=iterations, seed=seed)
    return TerrainPipeline().run(terrain_config, fault_config, **kwargs)


class TestFlatScenarios:

    def test_single_cell(self):
        terrain = run_pipeline(1)

        np.testing.assert_allclose(
            terrain.vertices, [[0, 0, 0], [1, 0, 0], [0, 1, 0], [1, 1, 0]]
        )
        np.testing.assert_array_equal(terrain.faces, [[0, 1, 2], [1, 3, 2]])
        np.testing.assert_array_equal(
            terrain.edges, [0, 1, 1, 2, 2, 0, 1, 3, 3, 2, 2, 1]
        )
        assert terrain.min_z == 0.0
        assert terrain.max_z == 0.0
        np.testing.assert_allclose(terrain.normals, np.tile([0.0, 0.0, 1.0], (4, 1)))

    def test_two_by_two(self):
        terrain = run_pipeline(2)
        assert terrain.n_vertices == 9
        assert terrain.n_faces == 8
        assert len(terrain.edges) == 48
        assert terrain.n_edges == 24
        assert terrain.min_z == terrain.max_z == 0.0

    @pytest.mark.parametrize("div", [1, 3, 10])
    def test_counts(self, div):
        terrain = run_pipeline(div, iterations=5)
        assert terrain.n_vertices == (div + 1) ** 2
        assert terrain.n_faces == 2 * div * div
        assert len(terrain.edge_buffer) == 12 * div * div


class TestFaultedTerrain:

    def test_extents_bound_every_height(self):
        terrain = run_pipeline(20, iterations=100, bounds=(-2.0, 2.0, -2.0, 2.0))
        z = terrain.vertices[:, 2]
        assert terrain.min_z == z.min()
        assert terrain.max_z == z.max()
        assert np.all(terrain.min_z <= z) and np.all(z <= terrain.max_z)
        assert terrain.min_z < terrain.max_z

    def test_normals_unit_length(self):
        terrain = run_pipeline(15, iterations=200)
        np.testing.assert_allclose(np.linalg.norm(terrain.normals, axis=1), 1.0, atol=1e-5)

    def test_same_seed_same_terrain(self):
        first = run_pipeline(12, iterations=80, seed=99)
        second = run_pipeline(12, iterations=80, seed=99)
        np.testing.assert_array_equal(first.vertices, second.vertices)
        np.testing.assert_array_equal(first.normals, second.normals)

    def test_injected_rng(self):
        terrain_config = TerrainConfig(div=6, min_x=0.0, max_x=1.0, min_y=0.0, max_y=1.0)
        fault_config = FaultConfig(iterations=30)
        first = TerrainPipeline(rng=np.random.default_rng(5)).run(terrain_config, fault_config)
        second = TerrainPipeline(rng=np.random.default_rng(5)).run(terrain_config, fault_config)
        np.testing.assert_array_equal(first.vertices, second.vertices)

    def test_extents_repeatable(self):
        terrain = run_pipeline(10, iterations=60, seed=4)
        first = find_z_extents(terrain.vertices)
        second = find_z_extents(terrain.vertices)
        assert first == second == (terrain.min_z, terrain.max_z)

    def test_normals_fill_grid_accumulators(self):
        """The normals array is the one allocated with the vertex grid."""
        allocated = []

        class RecordingGridGenerator(GridGenerator):
            def create_normal_accumulators(self, n_vertices):
                accumulators = super().create_normal_accumulators(n_vertices)
                allocated.append(accumulators)
                return accumulators

        pipeline = TerrainPipeline()
        pipeline.generator = RecordingGridGenerator()
        terrain = pipeline.run(
            TerrainConfig(div=3, min_x=0.0, max_x=1.0, min_y=0.0, max_y=1.0),
            FaultConfig(iterations=10, seed=1),
        )
        assert len(allocated) == 1
        assert terrain.normals is allocated[0]
        np.testing.assert_allclose(np.linalg.norm(terrain.normals, axis=1), 1.0, atol=1e-5)

    def test_generate_terrain_shortcut(self):
        terrain = ft.generate_terrain(4, -1.0, 1.0, -1.0, 1.0, iterations=10,
                                      rng=np.random.default_rng(0))
        assert terrain.n_faces == 32


class TestTerrainBuffers:

    def test_arrays_are_read_only(self):
        terrain = run_pipeline(3, iterations=4)
        for array in (terrain.vertices, terrain.faces, terrain.normals, terrain.edges):
            with pytest.raises(ValueError):
                array[0] = 0

    def test_flat_buffer_layout(self):
        terrain = run_pipeline(4, iterations=10)
        assert terrain.position_buffer.dtype == np.float32
        assert terrain.normal_buffer.dtype == np.float32
        assert terrain.face_buffer.dtype == np.uint32
        assert terrain.edge_buffer.dtype == np.uint32
        assert terrain.position_buffer.shape == (3 * terrain.n_vertices,)
        assert terrain.normal_buffer.shape == (3 * terrain.n_vertices,)
        assert terrain.face_buffer.shape == (3 * terrain.n_faces,)
        np.testing.assert_allclose(
            terrain.position_buffer[3:6], terrain.vertices[1], rtol=1e-6
        )

    def test_get_vertex(self):
        terrain = run_pipeline(4, bounds=(0.0, 4.0, 10.0, 18.0))
        assert terrain.get_vertex(0, 0) == (0.0, 10.0, 0.0)
        assert terrain.get_vertex(1, 3) == pytest.approx((3.0, 12.0, 0.0))
        with pytest.raises(IndexError):
            terrain.get_vertex(5, 0)

    def test_print_buffers(self, capsys):
        terrain = run_pipeline(1)
        capsys.readouterr()
        terrain.print_buffers()
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 6
        assert lines[0].startswith("v ")
        assert lines[4] == "f 0 1 2"
        assert lines[5] == "f 1 3 2"

    def test_to_pyvista(self):
        terrain = run_pipeline(5, iterations=20)
        mesh = terrain.to_pyvista()
        assert mesh.n_points == 36
        assert mesh.n_cells == 50
        np.testing.assert_allclose(mesh.point_data['elevation'], terrain.vertices[:, 2])


class TestOutputs:

    def test_metadata_written(self, tmp_path):
        run_pipeline(4, iterations=10,
                     visualization_config=VisualizationConfig(create_plots=False),
                     output_dir=tmp_path, save_metadata=True)
        metadata = json.loads((tmp_path / 'pipeline_metadata.json').read_text())
        assert metadata['configurations']['terrain']['div'] == 4
        assert metadata['processing_results']['mesh_statistics']['number_of_faces'] == 32

    def test_overview_plot_written(self, tmp_path):
        run_pipeline(6, iterations=10, output_dir=tmp_path)
        assert (tmp_path / 'terrain_overview.png').exists()

    def test_nothing_written_without_output_dir(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        run_pipeline(2, iterations=1)
        assert list(tmp_path.iterdir()) == []


class TestLoadConfig:

    def test_load_yaml(self, tmp_path):
        config_path = tmp_path / 'terrain_config.yaml'
        config_path.write_text(
            "terrain:\n"
            "  div: 8\n"
            "  min_x: -2.0\n"
            "  max_x: 2.0\n"
            "  min_y: -2.0\n"
            "  max_y: 2.0\n"
            "fault:\n"
            "  iterations: 50\n"
            "  seed: 3\n"
        )
        configs = load_config(str(config_path))
        assert configs['terrain_config'].div == 8
        assert configs['fault_config'].iterations == 50
        assert configs['fault_config'].delta == 0.004
        assert configs['visualization_config'].create_plots is True

    def test_invalid_domain_in_yaml(self, tmp_path):
        config_path = tmp_path / 'bad.yaml'
        config_path.write_text(
            "terrain: {div: 4, min_x: 1.0, max_x: 0.0, min_y: 0.0, max_y: 1.0}\n"
        )
        with pytest.raises(ft.InvalidDomain):
            load_config(str(config_path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / 'missing.yaml'))
