"""create-server-startup: interactive generator for boilerplate Express servers."""

__version__ = "1.0.0"
