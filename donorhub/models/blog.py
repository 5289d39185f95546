from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text

from donorhub.database import Base
from donorhub.utils.identifiers import new_id


class Blog(Base):
    __tablename__ = "blogs"

    id = Column(String(32), primary_key=True, default=new_id)
    title = Column(String(200), nullable=False)
    thumbnail = Column(String, nullable=True)
    content = Column(Text, nullable=False)
    created_by = Column(String, nullable=True)
    status = Column(String(20), nullable=False, default="draft", index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, nullable=True)
