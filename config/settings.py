"""
Application configuration settings.
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Flask configuration
SECRET_KEY = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')

# Resolved permission records (JSON list of {resourceName, identifiedBy, identifier, hasAccess})
PERMISSIONS_FILE = os.environ.get('PERMISSIONS_FILE', 'permissions.json')

LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()

# Flask app configuration
DEBUG = os.environ.get('FLASK_DEBUG', 'True').lower() == 'true'
HOST = os.environ.get('FLASK_HOST', '0.0.0.0')
PORT = int(os.environ.get('FLASK_PORT', 5000))
