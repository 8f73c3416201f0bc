"""Pure domain layer: instants, zones, payload types, and classification."""
