"""
Sensor Telemetry Backend root package.

This package contains the FastAPI app entry point (main.py), API routes,
domain logic, MongoDB infrastructure and the dependency injection container
for user accounts, device ownership and sensor event ingestion.
"""
