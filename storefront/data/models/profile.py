from sqlalchemy import Column, Integer, String

from storefront.data.database import Base


class ProfileModel(Base):
    __tablename__ = "profiles"

    user_id = Column(Integer, primary_key=True)
    first_name = Column(String(100), nullable=True)
    last_name = Column(String(100), nullable=True)
    phone = Column(String(30), nullable=True)
    email = Column(String(200), nullable=True)

    address = Column(String(200), nullable=True)
    city = Column(String(100), nullable=True)
    state = Column(String(50), nullable=True)
    zip = Column(String(20), nullable=True)
