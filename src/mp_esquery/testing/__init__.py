"""Testing – property-based generators for query inputs."""
