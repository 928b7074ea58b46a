from sqlalchemy import Column, Integer, String, Text

from .database import Base


class User(Base):
    """Registered Conduit account.

    `password` only ever holds a hash. `token` is minted once at sign-up
    and doubles as the bearer credential checked by the auth guard.
    """

    __tablename__ = "user"

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
    token = Column(String(255), unique=True, nullable=False, index=True)
    bio = Column(Text)
    image = Column(String(1024))
