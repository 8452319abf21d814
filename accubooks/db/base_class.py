from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Declarative base; every model names its own table."""
