"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems:
- Graph storage (CSV files)
- Route solving (Dijkstra)
- Rendering engines (Folium)
"""
