"""
This module contains the contracts for the application.
"""

from .base import BaseContract, DocumentContract, TimestampedContract
from .contact import ContactCreate, ContactResponse, ContactUpdate
from .error import ErrorResponse
from .user import AccessToken, CurrentUser, UserLogin, UserRegister, UserRegistered
