"""craftref: Minecraft command reference and live identifier lookup."""

__version__ = "1.0.0"
