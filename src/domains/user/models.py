from sqlalchemy import Column, Integer, String, DateTime, func

from core.database import Base


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    # identity provider's opaque key; referenced as user_id everywhere else
    external_id = Column(String(128), nullable=False, unique=True, index=True)
    first_name = Column(String(45), nullable=False, default="")
    last_name = Column(String(45), nullable=False, default="")
    nickname = Column(String(45), nullable=False, default="")
    email = Column(String(128), nullable=False, unique=True)
    image_ref = Column(String(512), nullable=False, default="")
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
