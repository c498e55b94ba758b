"""Backend-independent helpers for interactive 3D graphics: logging, log view, transforms, input, camera and debug-message routing."""

__version__ = "0.1.0"