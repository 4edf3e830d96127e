"""Presentation layer: text rendering, scripted battles and serialization schemas."""
