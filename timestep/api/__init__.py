"""Public timestep API contracts."""
