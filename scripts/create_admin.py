"""Create an admin account from the command line (first-run setup)."""
import argparse
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv  # noqa: E402

load_dotenv()

from softveda import create_app  # noqa: E402
from softveda.auth.credentials import DuplicateUsername  # noqa: E402
from softveda.auth.service import get_auth_service  # noqa: E402


def create_admin(app, username, password):
    with app.app_context():
        service = get_auth_service()
        try:
            admin_id = service.credentials.create_admin(username, service.hasher.hash(password))
        except DuplicateUsername:
            print(f"Admin '{username}' already exists.")
            return None
        print(f"Created admin: {username} (id {admin_id})")
        return admin_id


if __name__ == '__main__':
    parser = argparse.ArgumentParser(description='Create a new admin account.')
    parser.add_argument('username', help='Admin username')
    parser.add_argument('password', help='Admin password')

    args = parser.parse_args()
    if create_admin(create_app(), args.username.strip(), args.password.strip()) is None:
        sys.exit(1)
