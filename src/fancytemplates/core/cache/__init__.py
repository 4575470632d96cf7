"""
Core Cache Module

Provides the template and theme stores used by the file template provider:
- Insert-if-absent population
- Single Uninitialized -> Populated transition
- Process-wide shared instance
"""

from .manager import CacheState, CacheStats, TemplateCache, get_shared_cache

__all__ = [
    'CacheState',
    'CacheStats',
    'TemplateCache',
    'get_shared_cache',
]
