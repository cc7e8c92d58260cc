"""
Column mixins shared by the profile tables.
"""
import uuid

from sqlalchemy import Column, DateTime, String, func


def generate_id() -> str:
    return str(uuid.uuid4())


class UUIDPrimaryKeyMixin:
    id = Column(String(36), primary_key=True, default=generate_id)


class TimestampMixin:
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())
