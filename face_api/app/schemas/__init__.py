"""
Pydantic schema definitions for API payloads.

Request bodies and response models for faces live here, separated from
the store so the wire representation can evolve independently.
"""
