# services/auth.py
import logging
from typing import Optional

from firebase_admin import auth
from firebase_admin.exceptions import FirebaseError

import config
from models.user import AuthUser


class AuthSession:
    """Holds the currently signed-in identity, if any."""

    def __init__(self, current_user: Optional[AuthUser] = None):
        self.current_user = current_user

    @classmethod
    def from_id_token(cls, id_token: str) -> "AuthSession":
        """
        Verifies a Firebase ID token. An invalid or expired token yields a
        signed-out session rather than an error.
        """
        try:
            claims = auth.verify_id_token(id_token)
        except (ValueError, FirebaseError) as e:
            logging.warning(f"Could not verify ID token: {e}")
            return cls()
        return cls(
            AuthUser(uid=claims["uid"], email=claims.get("email"), name=claims.get("name"))
        )

    @property
    def is_signed_in(self) -> bool:
        return self.current_user is not None

    @property
    def uid(self) -> str:
        return self.current_user.uid if self.current_user else config.UNKNOWN_USER

    @property
    def email(self) -> str:
        if self.current_user and self.current_user.email:
            return str(self.current_user.email)
        return ""

    def sign_out(self):
        """Revokes the user's refresh tokens. Raises FirebaseError on failure."""
        if self.current_user is None:
            return
        auth.revoke_refresh_tokens(self.current_user.uid)
        logging.info(f"Signed out user {self.current_user.uid}.")
        self.current_user = None
