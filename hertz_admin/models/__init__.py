"""
Models Package

Exports all models for easy importing.
"""

from hertz_admin.models.admin_user import AdminUser
from hertz_admin.models.article import Article
from hertz_admin.models.site_stats import SiteStats
from hertz_admin.models.ad_block import AdBlock

__all__ = ['AdminUser', 'Article', 'SiteStats', 'AdBlock']
