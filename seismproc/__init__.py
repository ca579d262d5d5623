"""Data model and file formats for downhole microseismic projects."""

__version__ = "0.1.0"
__all__ = [
    "core",
    "wavepick",
    "trace",
    "channel",
    "receiver",
    "component",
    "component_io",
    "point_io",
    "horizon",
    "well",
    "event",
    "event_model",
    "horizon_model",
    "project",
]