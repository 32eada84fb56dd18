from sqlalchemy import Column, Enum, Integer, String
from app.database import Base
from app.models.enums import Role


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String, nullable=False)
    role = Column(Enum(Role, native_enum=False, length=20), nullable=False)
    name = Column(String(100))

    # Department.id, no FK: assigning an unknown department is allowed
    department = Column(String(50), nullable=True)
