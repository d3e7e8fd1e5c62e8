"""
Database initialization script.

    python -m app.db.init_db
"""
from app.db.session import SessionLocal, init_db
from app.db.seed import seed_reference_data


def main():
    print("Initializing database...")
    init_db()
    db = SessionLocal()
    try:
        seed_reference_data(db)
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()
    print("Database initialized successfully!")


if __name__ == "__main__":
    main()
