"""
API layer for the telemetry backend.

Exposes HTTP endpoints under /api/v1 (auth, devices, device events).
"""
