from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path


def _bootstrap_import_path() -> None:
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_bootstrap_import_path()

from career_platform.database import Base, SessionLocal, engine  # noqa: E402
from career_platform.models.job import Job  # noqa: E402
from career_platform.models.resource import Resource  # noqa: E402


def _load_json(path: Path):
    return json.loads(path.read_text(encoding="utf-8"))


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed jobs and learning resources into ORM tables.")
    parser.add_argument(
        "--catalog",
        default=str(Path(__file__).resolve().parents[1] / "career_platform" / "data" / "catalog.json"),
    )
    parser.add_argument("--truncate", action="store_true")
    args = parser.parse_args(argv)

    Base.metadata.create_all(bind=engine)
    catalog = _load_json(Path(args.catalog))

    with SessionLocal() as db:
        if args.truncate:
            db.query(Job).delete()
            db.query(Resource).delete()
            db.commit()

        inserted = {"jobs": 0, "resources": 0}

        for item in catalog.get("jobs") or []:
            title = str(item.get("job_title") or "").strip()
            if not title:
                continue
            if db.query(Job).filter(Job.job_title == title, Job.company == item.get("company")).first():
                continue
            db.add(
                Job(
                    job_title=title,
                    company=item.get("company"),
                    location=item.get("location"),
                    job_type=item.get("job_type"),
                    experience_level=item.get("experience_level"),
                    required_skills=str(item.get("required_skills") or ""),
                )
            )
            inserted["jobs"] += 1

        for item in catalog.get("resources") or []:
            title = str(item.get("title") or "").strip()
            url = str(item.get("url") or "").strip()
            if not title or not url:
                continue
            if db.query(Resource).filter(Resource.url == url).first():
                continue
            db.add(
                Resource(
                    title=title,
                    url=url,
                    platform=item.get("platform"),
                    cost=item.get("cost"),
                    related_skills=str(item.get("related_skills") or ""),
                )
            )
            inserted["resources"] += 1

        db.commit()

    print("seeded", inserted, "from", args.catalog)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
