# app/core/ids.py
import hashlib
import os
from uuid import uuid4

SID_LENGTH = 10


def new_record_id() -> str:
    return str(uuid4())


def new_app_uid() -> str:
    """Returns a fresh 64-char hex identifier for an app."""
    return hashlib.sha256(os.urandom(32)).hexdigest()


def app_sid(u_id: str) -> str:
    """Short identifier of an app: the first characters of its uId."""
    return u_id[:SID_LENGTH]
