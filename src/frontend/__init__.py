"""Flask frontend for the n-gram text model."""
