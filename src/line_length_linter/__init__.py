"""Line length governance for Python sources, shipped as a Pylint plugin and a CLI."""

__version__ = "1.0.0"
