"""A small 2D game framework on pygame: scenes, entities, resources, input, animation and sound."""

__version__ = "0.1.0"