"""
Data Models
===========

Pydantic value models shared by the color, style and rendering layers.
"""
