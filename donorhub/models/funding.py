from datetime import datetime

from sqlalchemy import Column, DateTime, Float, String

from donorhub.database import Base
from donorhub.utils.identifiers import new_id


class Funding(Base):
    __tablename__ = "fundings"

    id = Column(String(32), primary_key=True, default=new_id)
    amount = Column(Float, nullable=False, default=0)
    donor_name = Column(String, nullable=True)
    donor_email = Column(String, nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
