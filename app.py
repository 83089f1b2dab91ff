"""
Flask host application rendering permission scripts into served pages.
"""
import logging
from flask import Flask
from config import settings
from routes.main import main_bp
from services.permission_store import PermissionFileError, load_permissions
from utils.permission_injector import PermissionsInjector

# Configure detailed logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL, logging.INFO),
    format='%(asctime)s - %(threadName)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def create_app(permissions=None, permissions_file=None):
    """Application factory pattern"""
    app = Flask(__name__)
    app.secret_key = settings.SECRET_KEY

    if permissions is None:
        path = permissions_file or settings.PERMISSIONS_FILE
        try:
            permissions = load_permissions(path)
        except PermissionFileError as e:
            logger.error(f"Could not load permissions: {e}")
            permissions = []

    injector = PermissionsInjector(permissions)
    app.extensions['permissions_injector'] = injector

    # Templates call {{ permission_script(resource_name) }} where the script belongs
    app.jinja_env.globals['permission_script'] = injector.inject_as_markup

    app.register_blueprint(main_bp)

    logger.info(f"App created with {len(permissions)} permissions")
    return app


if __name__ == '__main__':
    logger.info("=== MAIN APPLICATION STARTING ===")
    app = create_app()
    logger.info("Starting Flask app...")
    app.run(debug=settings.DEBUG, host=settings.HOST, port=settings.PORT)
