"""
StockGrid - Multi-Stock Chart Grid Renderer

Fetches remote chart images for a list of stock symbols with bounded
concurrency and per-chart retry, then lays them out edge to edge in a
fixed-size panel with no unused space.
"""

__version__ = "0.1.0"
__author__ = "StockGrid Team"
