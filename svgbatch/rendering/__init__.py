"""Rasterization and concurrent job dispatch."""
