"""
Session Model

One row per live login. `kind` tags which identity the row carries;
`subject_name` is only set for user sessions.
"""

from softveda.extensions import db
from softveda.models.clock import utcnow


class SessionRecord(db.Model):
    """Server-side session keyed by the opaque id held in the cookie"""
    __tablename__ = 'sessions'

    id = db.Column(db.String(64), primary_key=True)
    kind = db.Column(db.String(10), nullable=False)  # 'user' or 'admin'
    subject_id = db.Column(db.Integer, nullable=False)
    subject_name = db.Column(db.String(120))
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)
    expires_at = db.Column(db.DateTime, nullable=False, index=True)

    @property
    def is_expired(self):
        return utcnow() >= self.expires_at

    def __repr__(self):
        return f'<SessionRecord {self.kind}:{self.subject_id}>'
