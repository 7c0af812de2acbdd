"""SQLAlchemy model for push device tokens."""

from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String
from sqlalchemy.sql import expression

from app.infrastructure.database import Base
from app.utils import now_for_storage


class DeviceTokenModel(Base):
    """Database representation of a device token and its current owner."""

    __tablename__ = "device_token"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(String(64), ForeignKey("user.id"), nullable=False, index=True)
    token = Column(String(255), nullable=False, unique=True, index=True)
    platform = Column(String(10), nullable=False, default="android")
    active = Column(
        Boolean,
        nullable=False,
        default=True,
        server_default=expression.true(),
    )
    created_at = Column(DateTime(), nullable=False, default=now_for_storage)
    updated_at = Column(DateTime(), nullable=False, default=now_for_storage)


__all__ = ["DeviceTokenModel"]
