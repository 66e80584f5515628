"""vitegen -- scaffold Vite front-end projects from a JSON config."""

__version__ = "0.1.0"
