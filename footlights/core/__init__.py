"""
Core Engine
===========

Core modules for style composition and rendering.

Modules:
- color: color grammar, solid colors and linear gradients
- style: immutable style values and attribute setters
- registry: ordered style registry
- engine: engine facade pairing a registry with a renderer
- rendering: registry to HTML rendering
- dsl: YAML/JSON style documents
"""
