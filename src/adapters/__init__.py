"""File adapters: JSON input and export."""
