# helper_arcade/models.py
from datetime import datetime, timezone

from .db import db


def _utcnow():
    return datetime.now(timezone.utc)


class Helper(db.Model):
    __tablename__ = "helpers"

    id          = db.Column(db.Integer, primary_key=True)
    name        = db.Column(db.String(80), unique=True, nullable=False)
    image       = db.Column(db.String(255), nullable=False)   # path or URL
    tools       = db.Column(db.JSON, nullable=False, default=list)  # 3 tool names
    description = db.Column(db.Text, nullable=False)          # one-sentence social story
    video       = db.Column(db.String(255))

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "image": self.image,
            "tools": list(self.tools or []),
            "description": self.description,
            "video": self.video,
        }


class UserProgress(db.Model):
    __tablename__ = "user_progress"

    id           = db.Column(db.Integer, primary_key=True)
    username     = db.Column(db.String(80), unique=True, nullable=False)
    stars_earned = db.Column(db.Integer, nullable=False, default=0)
    updated_at   = db.Column(db.DateTime(timezone=True), default=_utcnow, onupdate=_utcnow)

    def to_dict(self):
        return {"username": self.username, "starsEarned": self.stars_earned}
