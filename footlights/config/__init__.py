"""
Configuration Management
=======================

Environment-based configuration using Pydantic Settings.

Components:
- settings: Engine settings and environment configuration
- logging: Structured logging configuration
"""
