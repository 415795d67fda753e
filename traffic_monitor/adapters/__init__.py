"""Adapters layer - Concrete implementations of ports.

This module contains implementations of the port interfaces,
connecting the application to external systems:
- Routing providers (Google Routes API)
- Hosts (agent tools, workflows)
"""
