"""make-project: a personalized project initializer."""

__version__ = "0.1.0"
