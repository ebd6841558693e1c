from sqlalchemy.orm import declarative_base

# Shared declarative base for every SQLAlchemy model (and Alembic autogenerate)
Base = declarative_base()
