from extensions import db
from datetime import datetime
from sqlalchemy import JSON

# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())


class Project(db.Model):
    __tablename__ = 'projects'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    thumbnail_url = db.Column(db.String(500))
    detail_url = db.Column(db.String(500))
    tech_stack = db.Column(SafeJSON, default=list)
    is_published = db.Column(db.Boolean, default=False, nullable=False)
    sort_order = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    __table_args__ = (
        db.Index('idx_projects_published_order', 'is_published', 'sort_order'),
    )


class GuestbookEntry(db.Model):
    __tablename__ = 'guestbook_entries'
    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    author_name = db.Column(db.String(100), nullable=False)
    message = db.Column(db.Text, nullable=False)
    organization = db.Column(db.String(255))  # NULL when left blank
    email = db.Column(db.String(255))  # NULL when left blank
    is_email_public = db.Column(db.Boolean, default=False, nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)

    __table_args__ = (
        db.Index('idx_guestbook_created', 'created_at'),
    )


# Table names as exposed by the hosted store
TABLE_MODELS = {
    'projects': Project,
    'guestbook_entries': GuestbookEntry,
}


def record_to_dict(record):
    """Convert a model row to its wire-shaped dictionary"""
    result = {}
    for column in record.__table__.columns:
        value = getattr(record, column.name)
        if isinstance(value, datetime):
            value = value.isoformat()
        result[column.name] = value
    return result
