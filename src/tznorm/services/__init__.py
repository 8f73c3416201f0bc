"""Service layer: formatting, payload conversion, zone resolution, and adapters."""
