"""
Routers module - API endpoint handlers organized by feature.

- events: raw feed passthrough, month lists and month grids
"""
