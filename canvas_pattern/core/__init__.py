"""canvas_pattern.core — Foundation layer.

Contains the paint-style types, the CanvasPattern value, surface
acquisition, configuration and reporting.
Only stdlib, numpy, and PIL are allowed here.
"""
