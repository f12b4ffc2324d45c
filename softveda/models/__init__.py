"""
Models Package

Exports all models for easy importing.
"""

from softveda.models.account import User, Admin
from softveda.models.contact import Contact
from softveda.models.session import SessionRecord

__all__ = ['User', 'Admin', 'Contact', 'SessionRecord']
