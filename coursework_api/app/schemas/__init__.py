"""
Pydantic schema definitions for API payloads.

Each exercise defines its own models for request and response bodies.
Schemas are separated from storage so that the wire representation has
a fixed field set regardless of what the store keeps.
"""
