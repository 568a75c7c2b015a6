"""Console collection of algorithm exercises, data structures and probability modelling tasks."""

__version__ = "0.1.0"