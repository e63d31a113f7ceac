"""Core: schemas, services and configuration of the tour."""
