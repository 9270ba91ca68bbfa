__version__ = "v1.2.0"
