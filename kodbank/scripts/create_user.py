"""
Create an account from the command line. Run from project root:
  python -m kodbank.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m kodbank.scripts.create_user alice alice@example.com s3cret customer
"""
import argparse
import sys

from pydantic import ValidationError as SchemaValidationError

from kodbank.core.database import SessionLocal
from kodbank.core.errors import ConflictError
from kodbank.schemas.auth import RegisterRequest
from kodbank.services.accounts import register_account


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Kodbank account.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("email", help="Email (1-255 chars)")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("role", nargs="?", default="customer", choices=["customer", "admin"])
    parser.add_argument("--phone", default=None, help="Optional phone number")
    args = parser.parse_args(argv)

    try:
        body = RegisterRequest(
            username=args.username.strip(),
            email=args.email.strip(),
            password=args.password,
            phone=args.phone,
        )
    except SchemaValidationError as e:
        print(f"Invalid input: {e.error_count()} field error(s).", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        account = register_account(db, body)
        if args.role != account.role:
            account.role = args.role
            db.commit()
        print(f"Created account '{account.username}' with role '{account.role}'.")
        return 0
    except ConflictError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
