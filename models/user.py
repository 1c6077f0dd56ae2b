from typing import Optional

from pydantic import BaseModel, EmailStr


class AuthUser(BaseModel):
    """
    The signed-in identity verified from a Firebase ID token. Its `uid` is what
    inventory saves stamp into `createdBy`/`lastUpdatedBy`, and its email is
    the read-only email shown on the profile. With no AuthUser the session
    reports the "Unknown" sentinel instead.
    """

    uid: str
    email: Optional[EmailStr] = None
    name: Optional[str] = None
