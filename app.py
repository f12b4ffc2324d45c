"""
SoftVeda web backend
Application Entry Point

This file serves as the entry point for the Flask application.
It uses the application factory pattern defined in the softveda package.
"""

import logging
import sys

from dotenv import load_dotenv

load_dotenv()

from softveda import create_app  # noqa: E402  (load_dotenv needs to run first)
from softveda.errors import StoreUnavailable  # noqa: E402

logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s %(name)s: %(message)s')

try:
    app = create_app()
except StoreUnavailable:
    # No storage backing, no serving
    sys.exit(1)

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=app.config['PORT'])
