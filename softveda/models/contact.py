"""
Contact Model
"""

from softveda.extensions import db
from softveda.models.clock import utcnow


class Contact(db.Model):
    """Message left through the public contact form"""
    __tablename__ = 'contacts'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False)
    email = db.Column(db.String(255), nullable=False)
    subject = db.Column(db.String(255))
    message = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=utcnow, nullable=False)

    def __repr__(self):
        return f'<Contact {self.email}: {self.subject}>'
