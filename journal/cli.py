"""CLI tool for admin operations.

Usage:
    python -m journal.cli create-user
"""

import sys
import getpass

from sqlmodel import Session, select

from journal.database import engine, create_db_and_tables
from journal.models.user import User
from journal.services.auth import hash_password


def create_user(role: str = "USER"):
    """Create a journal user from the terminal."""
    create_db_and_tables()

    email = input("Email: ").strip().lower()
    if not email or "@" not in email:
        print("A valid email is required.")
        sys.exit(1)

    with Session(engine) as session:
        existing = session.exec(select(User).where(User.email == email)).first()
        if existing:
            print(f"User '{email}' already exists.")
            sys.exit(1)

    password = getpass.getpass("Password: ")
    password_confirm = getpass.getpass("Confirm password: ")
    if password != password_confirm:
        print("Passwords do not match.")
        sys.exit(1)
    if len(password) < 8:
        print("Password must be at least 8 characters.")
        sys.exit(1)

    user = User(email=email, hashed_password=hash_password(password), role=role)

    with Session(engine) as session:
        session.add(user)
        session.commit()

    print(f"\nUser '{email}' created with role {role}.")


def main():
    if len(sys.argv) < 2:
        print("Usage: python -m journal.cli <command>")
        print("Commands: create-user, create-admin")
        sys.exit(1)

    command = sys.argv[1]
    if command == "create-user":
        create_user()
    elif command == "create-admin":
        create_user(role="ADMIN")
    else:
        print(f"Unknown command: {command}")
        sys.exit(1)


if __name__ == "__main__":
    main()
