"""Domain schemas.

Why:
- The schemas of the tour live here as plain pydantic v2 models and types.
- The domain knows nothing about the CLI or files: only what a valid value is.
"""
