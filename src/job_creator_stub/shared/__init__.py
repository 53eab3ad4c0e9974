"""
Shared Utilities

Responsibility:
    Cross-cutting concerns used across all layers.

Contains:
    - config: Environment-based Settings and BIND_ADDR parsing

Does NOT contain:
    - Business logic
    - Infrastructure implementations
"""

from job_creator_stub.shared.config import Settings, get_settings, parse_bind_addr

__all__ = ["Settings", "get_settings", "parse_bind_addr"]
