"""
Color Module
============

Textual color validation and construction of solid and gradient colors.

Components:
- grammar: CSS color syntax recognition with per-channel range checks
- parser: solid color parsing and linear gradient construction
"""
