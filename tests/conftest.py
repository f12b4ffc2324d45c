import pytest

from softveda import create_app
from softveda.config import TestConfig


@pytest.fixture()
def app():
    # Fresh in-memory database per test
    return create_app(TestConfig)


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def app_ctx(app):
    # Only for direct store/service tests: the test client must not run
    # inside this context, or Flask-Login would cache one identity across requests.
    with app.app_context():
        yield


@pytest.fixture()
def service(app, app_ctx):
    return app.extensions['softveda.auth']


@pytest.fixture()
def sessions(app, app_ctx):
    return app.extensions['softveda.sessions']


@pytest.fixture()
def register_user(client):
    def _register(name='A', email='a@b.com', password='pw123'):
        return client.post('/auth/register', data={
            'role': 'user', 'name': name, 'email': email, 'password': password,
        })
    return _register


@pytest.fixture()
def login(client):
    def _login(role, identifier, password):
        return client.post('/auth/login', data={
            'role': role, 'emailOrUsername': identifier, 'password': password,
        })
    return _login


@pytest.fixture()
def bootstrap_admin(client):
    def _bootstrap(username='root', password='s3cret'):
        return client.post('/auth/register', data={
            'role': 'admin', 'username': username, 'password': password,
            'adminSecret': TestConfig.ADMIN_SECRET,
        })
    return _bootstrap
