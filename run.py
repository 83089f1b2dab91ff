#!/usr/bin/env python3
"""
Startup script for the permission injector Flask application
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# Check if PERMISSIONS_FILE is set
if not os.environ.get('PERMISSIONS_FILE'):
    print("Warning: PERMISSIONS_FILE environment variable not set.")
    print("Using default: permissions.json")
    print("Set PERMISSIONS_FILE in your .env file or environment to point at your resolved permissions.")
    print()

# Import and run the Flask app
from app import create_app
from config.settings import DEBUG, HOST, PORT

if __name__ == '__main__':
    print("Starting Permission Injector Flask Application...")
    print(f"Permissions: {os.environ.get('PERMISSIONS_FILE', 'permissions.json')}")
    print(f"Web Interface: http://localhost:{PORT}")
    print("Press Ctrl+C to stop")
    print()

    create_app().run(debug=DEBUG, host=HOST, port=PORT)
