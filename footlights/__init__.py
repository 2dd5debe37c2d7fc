"""
Footlights
==========

A style-composition and rendering engine that turns a registry of named visual
styles (colors, gradients, images, corner rounding, shadows) into deterministic
HTML markup for embedding into a host document.

This package provides:
- Color model with a validated CSS color grammar
- Immutable style values and an ordered style registry
- A Jinja2-backed renderer with explicit image reference policies
- YAML/JSON style documents and a command line renderer
"""

__version__ = "0.1.0"
__author__ = "Footlights Team"
