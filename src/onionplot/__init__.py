"""Onion plots for visualizing bitstring optimization runs."""
from onionplot.config import DEFAULT_CONFIG, EnvelopeConfig
from onionplot.model.points import Point
from onionplot.model.envelope import gaussian, generate_gauss_points
from onionplot.model.converters import gauss_to_view, percentage_to_view
from onionplot.model.projector import bitstring_to_onion_coords, project_to_view
from onionplot.model.path import generate_gauss_path, parse_path

__all__ = [
    "DEFAULT_CONFIG",
    "EnvelopeConfig",
    "Point",
    "gaussian",
    "generate_gauss_points",
    "gauss_to_view",
    "percentage_to_view",
    "bitstring_to_onion_coords",
    "project_to_view",
    "generate_gauss_path",
    "parse_path",
]
