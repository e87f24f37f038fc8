import uuid
from sqlalchemy import UUID, Column, DateTime, Enum, String, func, event
import enum
from reachout.core.database import Base
from reachout.models.common import utcnow

class UserRole(str, enum.Enum):
    SUPER_ADMIN = "super_admin"
    ADMIN = "admin"

class UserStatus(str, enum.Enum):
    ACTIVE = "active"
    DISABLED = "disabled"

class User(Base):
    """An operator allowed into the admin dashboard."""
    __tablename__ = "users"

    id = Column(UUID(as_uuid=True), primary_key=True, index=True, default=uuid.uuid4)
    email = Column(String, unique=True, index=True, nullable=False)
    full_name = Column(String, nullable=False)
    hashed_password = Column(String, nullable=False)
    role = Column(Enum(UserRole), nullable=False, default=UserRole.ADMIN.value)
    status = Column(Enum(UserStatus), nullable=False, default=UserStatus.ACTIVE.value)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now()
    )
    updated_at = Column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        server_default=func.now(),
        onupdate=utcnow
    )


    def __repr__(self):
        return f"<User {self.email}>"

@event.listens_for(User, 'before_update')
def receive_before_update(mapper, connection, target):
    target.updated_at = utcnow()


class RevokedToken(Base):
    """Access tokens ended by sign-out, keyed by their jti claim."""
    __tablename__ = "revoked_tokens"

    jti = Column(String(64), primary_key=True)
    user_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    expires_at = Column(DateTime(timezone=True), nullable=False)
    revoked_at = Column(DateTime(timezone=True), nullable=False, default=utcnow, server_default=func.now())
