"""
Services Package

Exports all services for easy importing.
"""

from hertz_admin.services.slugs import slugify, unique_slug

__all__ = [
    'slugify',
    'unique_slug',
]
