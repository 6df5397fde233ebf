"""Simulated components for the demo server."""

from .components import SimCache, SimComponent, SimDatabase, SimRoutes, build_sim_components

__all__ = [
    "SimComponent",
    "SimDatabase",
    "SimCache",
    "SimRoutes",
    "build_sim_components",
]
