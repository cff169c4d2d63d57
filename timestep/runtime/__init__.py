"""Timestep runtime modules."""
