"""
Contact Routes

Stores messages from the public contact form.
"""

import logging

from flask import jsonify, request
from sqlalchemy.exc import SQLAlchemyError

from softveda.contact import contact_bp
from softveda.extensions import db
from softveda.models import Contact

logger = logging.getLogger(__name__)


@contact_bp.route('/contact', methods=['POST'])
def submit_contact():
    """Save a contact form submission"""
    payload = request.get_json(silent=True)
    data = payload if isinstance(payload, dict) else request.form

    name = str(data.get('name') or '').strip()
    email = str(data.get('email') or '').strip()
    subject = str(data.get('subject') or '').strip() or None
    message = str(data.get('message') or '').strip()

    if not name or not email or not message:
        return jsonify(success=False, error='Missing fields'), 400

    try:
        db.session.add(Contact(name=name, email=email, subject=subject, message=message))
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        logger.error('Could not store contact message: %s', e)
        return jsonify(success=False), 500

    logger.info('Contact message received from %s', email)
    return jsonify(success=True)
