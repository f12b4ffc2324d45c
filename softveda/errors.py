"""
Error taxonomy

Every failure the request boundary knows how to report is a SoftvedaError
carrying its HTTP status. The app factory registers `handle_softveda_error`
so none of these escape as a 500 traceback.
"""

import logging

from flask import jsonify, request

logger = logging.getLogger(__name__)


class SoftvedaError(Exception):
    """Base error surfaced to the client as a status code plus message."""
    status_code = 500
    message = 'Internal error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        self.message = message or self.message

    @property
    def kind(self):
        return type(self).__name__


class ValidationError(SoftvedaError):
    """A required field is missing."""
    status_code = 400
    message = 'Missing fields'


class EmailExists(SoftvedaError):
    status_code = 400
    message = 'Email already exists'


class AdminExists(SoftvedaError):
    status_code = 400
    message = 'Admin exists'


class Forbidden(SoftvedaError):
    """Admin creation without the bootstrap secret or an admin session."""
    status_code = 403
    message = 'Admin request denied'


class InvalidCredentials(SoftvedaError):
    """Unknown identifier or wrong password; the two are not told apart."""
    status_code = 400
    message = 'Invalid credentials'


class InvalidRole(SoftvedaError):
    status_code = 400
    message = 'Invalid role'


class StoreUnavailable(SoftvedaError):
    """The relational store could not complete an operation."""
    status_code = 500
    message = 'Storage unavailable'


def handle_softveda_error(error):
    """Render a SoftvedaError as JSON for JSON requests, plain text otherwise."""
    if error.status_code >= 500:
        logger.error('%s: %s', error.kind, error.message)
    if request.is_json:
        return jsonify(error=error.kind, message=error.message), error.status_code
    return error.message, error.status_code, {'Content-Type': 'text/plain; charset=utf-8'}
