from sqlalchemy import Column, Integer, String, DateTime
from database import Base
from models.audit_mixin import TimestampMixin


class RevokedToken(Base, TimestampMixin):
    __tablename__ = "revoked_tokens"

    id = Column(Integer, primary_key=True, index=True)
    # "jti" claim, or a sha256 of the raw token when the provider omits jti
    token_id = Column(String, unique=True, index=True, nullable=False)
    user_id = Column(String, index=True, nullable=False)
    expires_at = Column(DateTime(timezone=True), nullable=True)
