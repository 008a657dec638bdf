import fault_terrain as ft

def main():
    # Load all configurations from YAML file
    configs = ft.load_config("terrain_config.yaml")

    # Run pipeline with loaded configs
    pipeline = ft.TerrainPipeline()
    terrain = pipeline.run(
        output_dir="terrain_output",
        save_metadata=True,
        **configs  # Unpacks all config objects
    )

    print(f"Terrain completed! z range [{terrain.min_z:.4f}, {terrain.max_z:.4f}]")

if __name__ == "__main__":
    main()
