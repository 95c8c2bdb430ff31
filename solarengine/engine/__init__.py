"""Computation engines for SolarEngine."""
