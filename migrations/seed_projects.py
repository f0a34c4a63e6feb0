"""
Seed Script: sample projects for the SQL gateway backend
Inserts the bundled sample projects into the 'projects' table.

Usage:
    python migrations/seed_projects.py [--force]

Existing rows are left alone unless --force is given, which clears the
table first.
"""

import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from extensions import db
from models import Project
from utils.seed import SAMPLE_PROJECTS


def seed_projects(force=False):
    """Insert sample projects; returns the number of rows added"""
    existing = Project.query.count()
    if existing and not force:
        print(f"projects table already has {existing} rows, skipping (use --force to replace)")
        return 0

    if force:
        Project.query.delete()

    for project_data in SAMPLE_PROJECTS:
        db.session.add(Project(**project_data))
    db.session.commit()
    print(f"Seeded {len(SAMPLE_PROJECTS)} projects")
    return len(SAMPLE_PROJECTS)


def main():
    app = create_app()
    if app.config.get('GATEWAY_BACKEND') != 'sql':
        print("GATEWAY_BACKEND is not 'sql'; seed the hosted store through its own console")
        return 1

    with app.app_context():
        try:
            seed_projects(force='--force' in sys.argv[1:])
        except Exception as e:
            db.session.rollback()
            print(f"Seeding failed: {str(e)}")
            return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
