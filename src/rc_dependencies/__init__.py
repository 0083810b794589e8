"""Find dependency folders and measure their disk usage."""

__version__ = "0.1.0"
