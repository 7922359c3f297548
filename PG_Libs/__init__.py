"""
PG_Libs - Pixel Graph Library Modules

This package contains core functionality for the Pixel Graph project,
organized into specialized sub-packages:

- GraphLib: Dataflow graph model, node registry and evaluation engine
- ImageEditingLib: Pillow/numpy image operations used by the node kinds
- NodesLib: Concrete image processing node kinds
"""

__version__ = "0.1.0"
