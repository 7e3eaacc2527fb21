"""
External capability adapters.
"""

from .service import ExternalAPIService
from .auth import FirebaseAuthService
from .firestore import FirestoreService, decode_value, encode_value

__all__ = [
    "ExternalAPIService",
    "FirebaseAuthService",
    "FirestoreService",
    "decode_value",
    "encode_value",
]
