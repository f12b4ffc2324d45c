import pytest

from softveda.auth.identity import ANONYMOUS, AuthenticatedAdmin, AuthenticatedUser
from softveda.config import TestConfig
from softveda.errors import (
    AdminExists,
    EmailExists,
    Forbidden,
    InvalidCredentials,
    InvalidRole,
    ValidationError,
)

SECRET = TestConfig.ADMIN_SECRET


def user_form(**overrides):
    data = {'role': 'user', 'name': 'A', 'email': 'a@b.com', 'password': 'pw123'}
    data.update(overrides)
    return data


def admin_form(**overrides):
    data = {'role': 'admin', 'username': 'root', 'password': 's3cret', 'adminSecret': SECRET}
    data.update(overrides)
    return data


# -----------------------------------------------------------------------------
# Registration
# -----------------------------------------------------------------------------

def test_distinct_users_register(service):
    first = service.register(user_form(email='a@x.com'), ANONYMOUS)
    second = service.register(user_form(email='b@x.com'), ANONYMOUS)
    assert first != second


def test_same_email_in_other_case_is_rejected(service):
    service.register(user_form(email='A@x.com'), ANONYMOUS)
    with pytest.raises(EmailExists):
        service.register(user_form(email='a@X.com'), ANONYMOUS)


@pytest.mark.parametrize('missing', ['name', 'email', 'password'])
def test_user_registration_requires_every_field(service, missing):
    with pytest.raises(ValidationError):
        service.register(user_form(**{missing: '  '}), ANONYMOUS)


def test_registration_opens_no_session(service, sessions):
    from softveda.models import SessionRecord
    service.register(user_form(), ANONYMOUS)
    assert SessionRecord.query.count() == 0


def test_unknown_role(service):
    with pytest.raises(InvalidRole):
        service.register({'role': 'superuser'}, ANONYMOUS)
    with pytest.raises(InvalidRole):
        service.register({}, ANONYMOUS)


@pytest.mark.parametrize('secret', [None, '', 'wrong', SECRET.upper()])
def test_admin_registration_without_secret_is_forbidden(service, secret):
    with pytest.raises(Forbidden):
        service.register(admin_form(adminSecret=secret), ANONYMOUS)


def test_logged_in_user_cannot_create_admins(service):
    with pytest.raises(Forbidden):
        service.register(admin_form(adminSecret=None), AuthenticatedUser(1, 'A'))


def test_admin_registration_with_secret_succeeds_once(service):
    service.register(admin_form(), ANONYMOUS)
    with pytest.raises(AdminExists):
        service.register(admin_form(password='other'), ANONYMOUS)


def test_admin_session_can_create_admins_without_secret(service):
    admin_id = service.register(admin_form(username='second', adminSecret=None), AuthenticatedAdmin(1))
    assert service.credentials.find_admin_by_username('second').id == admin_id


def test_admin_registration_requires_fields(service):
    with pytest.raises(ValidationError):
        service.register(admin_form(username=''), ANONYMOUS)
    with pytest.raises(ValidationError):
        service.register(admin_form(password=''), ANONYMOUS)


# -----------------------------------------------------------------------------
# Login
# -----------------------------------------------------------------------------

def test_user_login_opens_user_session(service, sessions):
    user_id = service.register(user_form(), ANONYMOUS)

    sid, identity = service.login('user', 'A@B.com', 'pw123')

    assert identity == AuthenticatedUser(user_id=user_id, user_name='A')
    assert sessions.load(sid) == identity


@pytest.mark.parametrize('password', ['pw124', 'Pw123', 'pw12', 'pw1234', 'xw123'])
def test_mutated_password_is_rejected(service, password):
    service.register(user_form(), ANONYMOUS)
    with pytest.raises(InvalidCredentials):
        service.login('user', 'a@b.com', password)


def test_unknown_email_is_rejected(service):
    with pytest.raises(InvalidCredentials):
        service.login('user', 'ghost@b.com', 'pw123')


def test_login_trims_password(service):
    service.register(user_form(password=' pw123 '), ANONYMOUS)
    service.login('user', 'a@b.com', 'pw123')
    service.login('user', 'a@b.com', '  pw123')


def test_admin_login_opens_admin_session(service, sessions):
    admin_id = service.register(admin_form(), ANONYMOUS)

    sid, identity = service.login('admin', ' root ', 's3cret')

    assert identity == AuthenticatedAdmin(admin_id=admin_id)
    assert sessions.load(sid) == identity


def test_admin_login_lowercases_the_username(service):
    admin_id = service.register(admin_form(username='root'), ANONYMOUS)

    _, identity = service.login('admin', ' ROOT ', 's3cret')

    assert identity == AuthenticatedAdmin(admin_id=admin_id)


def test_admin_username_is_matched_exactly_after_lowercasing(service):
    # stored usernames keep their case, so a mixed-case admin never matches
    service.register(admin_form(username='Boss'), ANONYMOUS)

    with pytest.raises(InvalidCredentials):
        service.login('admin', 'Boss', 's3cret')


def test_user_credentials_do_not_open_admin_sessions(service):
    service.register(user_form(), ANONYMOUS)
    with pytest.raises(InvalidCredentials):
        service.login('admin', 'a@b.com', 'pw123')


def test_login_with_unknown_role(service):
    with pytest.raises(InvalidRole):
        service.login('root', 'a@b.com', 'pw123')


def test_login_requires_identifier_and_password(service):
    with pytest.raises(ValidationError):
        service.login('user', None, 'pw123')
    with pytest.raises(ValidationError):
        service.login('user', 'a@b.com', '')


def test_login_replaces_the_previous_session(service, sessions):
    service.register(user_form(), ANONYMOUS)
    service.register(admin_form(), ANONYMOUS)

    user_sid, _ = service.login('user', 'a@b.com', 'pw123')
    admin_sid, admin = service.login('admin', 'root', 's3cret', previous_session_id=user_sid)

    assert admin_sid != user_sid
    assert sessions.load(user_sid) == ANONYMOUS
    assert sessions.load(admin_sid) == admin


def test_logout_returns_session_to_anonymous(service, sessions):
    service.register(user_form(), ANONYMOUS)
    sid, _ = service.login('user', 'a@b.com', 'pw123')

    service.logout(sid)

    assert sessions.load(sid) == ANONYMOUS
