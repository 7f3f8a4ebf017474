from __future__ import annotations

import argparse
import secrets
import string
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from career_platform.config import build_sqlalchemy_db_url, is_admin_email, settings  # noqa: E402
from career_platform.database import Base, SessionLocal, engine  # noqa: E402
from career_platform.models.user import User  # noqa: E402
from career_platform.utils.password_hash import hash_password  # noqa: E402


def _ensure_tables() -> None:
    if build_sqlalchemy_db_url(settings).startswith("sqlite"):
        Base.metadata.create_all(bind=engine)


def _generate_password(length: int = 20) -> str:
    alphabet = string.ascii_letters + string.digits
    return "".join(secrets.choice(alphabet) for _ in range(length))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description=(
            "Create (or update) an admin account. "
            "Admin access is granted by listing the email in ADMIN_EMAILS."
        )
    )
    parser.add_argument("--email", required=True, help="Admin user email")
    parser.add_argument("--password", default=None, help="Admin password (generated if omitted)")
    parser.add_argument("--name", default="Admin", help="Full name")
    parser.add_argument("--update-password", action="store_true", help="Overwrite the password of an existing user")
    args = parser.parse_args(argv)

    _ensure_tables()
    password = args.password or _generate_password()

    with SessionLocal() as db:
        user = db.query(User).filter(User.email == args.email).first()
        created = user is None
        if created:
            user = User(email=args.email, password_hash=hash_password(password), full_name=args.name, skills="")
            db.add(user)
            db.commit()
            db.refresh(user)
        elif args.update_password:
            user.password_hash = hash_password(password)
            db.add(user)
            db.commit()

    if not is_admin_email(args.email):
        sys.stderr.write(
            "WARNING: This user is not an admin yet. Add it to ADMIN_EMAILS, e.g.\n"
            f"  ADMIN_EMAILS=[\"{args.email}\"]\n"
        )

    if created:
        print(f"created user id={user.id} email={args.email}")
        if args.password is None:
            print(f"generated password: {password}")
    else:
        print(f"user already exists email={args.email}")
        if args.update_password:
            print("password updated")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
