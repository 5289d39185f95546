from datetime import datetime

from sqlalchemy import Column, DateTime, String

from donorhub.database import Base
from donorhub.utils.identifiers import new_id


class User(Base):
    __tablename__ = "users"

    id = Column(String(32), primary_key=True, default=new_id)

    # Registration fields
    email = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    avatar = Column(String, nullable=True)     # image URL
    blood_group = Column(String(3), nullable=False)
    district = Column(String, nullable=False)
    upazila = Column(String, nullable=False)
    password_hash = Column(String, nullable=False)

    role = Column(String(20), nullable=False, default="donor", index=True)
    status = Column(String(20), nullable=False, default="active", index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
