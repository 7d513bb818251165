
import uuid
from sqlalchemy import Column, String, Boolean, DateTime, func
from opportunities.db.session import Base


class User(Base):
    __tablename__ = "users"

    # String ids: identities can come from an external provider's `sub` claim
    id = Column(String(64), primary_key=True, default=lambda: str(uuid.uuid4()))
    email = Column(String(255), unique=True, nullable=True, index=True)
    password_hash = Column(String(255), nullable=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    nickname = Column(String(100), nullable=True)
    profile_image_url = Column(String, nullable=True)
    location = Column(String(255), nullable=True)
    phone = Column(String(20), nullable=True)
    school_name = Column(String(255), nullable=True)
    grade = Column(String(20), nullable=True)
    address = Column(String(255), nullable=True)
    role = Column(String(20), nullable=False, default="user")  # user, admin
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now(), nullable=True)
