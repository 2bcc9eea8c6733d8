"""Tests for database initialization."""
import os
import tempfile

from sqlalchemy import create_engine, inspect

import auth_backend.db as db_module
from auth_backend.db import engine_options, init_db


def test_init_db_creates_users_table():
    """Test that init_db creates the users table with a unique email index."""
    # Create a temporary database
    with tempfile.NamedTemporaryFile(delete=False, suffix='.db') as tmp:
        tmp_db_path = tmp.name

    test_engine = create_engine(f"sqlite:///{tmp_db_path}", connect_args={"check_same_thread": False})
    original_engine = db_module.engine
    db_module.engine = test_engine
    try:
        init_db()

        inspector = inspect(test_engine)
        assert 'users' in inspector.get_table_names()

        columns = {col['name']: col for col in inspector.get_columns('users')}
        for col_name in ['id', 'name', 'email', 'password']:
            assert col_name in columns, f"Column {col_name} should exist in users table"
        assert columns['email']['nullable'] is False
        assert columns['password']['nullable'] is False

        email_index = next(idx for idx in inspector.get_indexes('users') if idx['column_names'] == ['email'])
        assert email_index['unique']
    finally:
        db_module.engine = original_engine
        test_engine.dispose()
        if os.path.exists(tmp_db_path):
            os.unlink(tmp_db_path)


def test_engine_options_sqlite_skips_pool_sizing():
    assert engine_options("sqlite:///./app.db") == {"connect_args": {"check_same_thread": False}}


def test_engine_options_server_database_uses_bounded_pool():
    options = engine_options("mysql+pymysql://app:secret@db/users")
    assert options["pool_size"] == 10
    assert options["max_overflow"] == 0
    assert options["pool_timeout"] is None
