"""Store resource of the pet store API."""
