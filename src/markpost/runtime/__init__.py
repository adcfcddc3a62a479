"""Runtime services: telemetry and environment settings."""
