"""SnapTrack attendance backend.

Organized by feature modules (users, classes, attendance) with a thin Flask
controller layer over service and repository layers.
"""
