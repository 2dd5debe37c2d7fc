"""
Rendering Module
================

Registry to HTML rendering.

Components:
- renderer: deterministic HTML fragment generation
- templates: Jinja2 canvas template
"""
