"""Wacky races: vehicle garage management and text-mode race simulation."""

__version__ = "0.1.0"
__all__ = ["inputs", "vehicles", "track", "vehicle_console", "menus"]