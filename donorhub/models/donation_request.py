from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text

from donorhub.database import Base
from donorhub.utils.identifiers import new_id


class DonationRequest(Base):
    __tablename__ = "donation_requests"

    id = Column(String(32), primary_key=True, default=new_id)
    requester_name = Column(String, nullable=False)
    # soft reference to users.email, checked only when the request is created
    requester_email = Column(String, nullable=False, index=True)
    recipient_name = Column(String, nullable=False)
    recipient_district = Column(String, nullable=False)
    recipient_upazila = Column(String, nullable=False)
    hospital_name = Column(String, nullable=False)
    full_address = Column(String, nullable=False)
    blood_group = Column(String(3), nullable=False)
    donation_date = Column(String, nullable=False)    # YYYY-MM-DD
    donation_time = Column(String, nullable=False)    # HH:MM
    request_message = Column(Text, nullable=True)
    donation_status = Column(String(20), nullable=False, default="pending", index=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
