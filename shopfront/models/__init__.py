"""
Models Package

Exports all models for easy importing.
"""

from shopfront.models.user import User
from shopfront.models.product import Product

__all__ = ['User', 'Product']
