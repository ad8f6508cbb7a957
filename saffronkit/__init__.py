"""Building blocks for 2D interactive applications: events, input state, frame clock, camera, scenes, logging and editor layout data."""

__version__ = "0.1.0"