from . import db
from datetime import datetime, timezone

FAILED_CONTENT = "Failed to generate blog."
EMPTY_CONTENT = "No content generated."


def utcnow() -> datetime:
    # stored naive, always UTC
    return datetime.now(timezone.utc).replace(tzinfo=None)


class BlogPost(db.Model):
    __tablename__ = "blog_posts"
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.Text)
    details = db.Column(db.Text)
    content = db.Column(db.Text, default="")
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False, index=True)

    @classmethod
    def newest_first(cls):
        return cls.query.order_by(cls.created_at.desc(), cls.id.desc()).all()

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "details": self.details,
            "content": self.content,
            "createdAt": self.created_at.isoformat() + "Z" if self.created_at else None,
        }
