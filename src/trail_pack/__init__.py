"""Trail Pack - equipment checklist recommendations for outdoor trips."""

__version__ = "0.1.0"
