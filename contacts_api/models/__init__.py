from .base import TimestampedDocument, utc_now

from .user import User
from .contact import Contact

DOCUMENT_MODELS = [User, Contact]
