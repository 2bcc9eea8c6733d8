from sqlalchemy import Column, Integer, String
from .db import Base


class User(Base):
    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    # bcrypt hash; the column keeps its historical name
    password_hash = Column("password", String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email}>"
