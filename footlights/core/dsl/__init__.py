"""
Style Document Module
=====================

Loading of YAML/JSON style documents into a style registry.

Components:
- loader: document validation and registry construction
"""
