"""
auth_backend package

Minimal authentication backend. It includes:

- FastAPI application and error handlers (`main.py`)
- SQLAlchemy models and database integration (`models.py`, `db.py`)
- Credential store over the users table (`store.py`)
- Password hashing, token signing and the auth service (`auth.py`)
- Pydantic schemas (`schemas.py`) and settings (`config.py`)
"""
