"""
Main routes for Flask application.
"""
import logging
import traceback
from flask import Blueprint, current_app, jsonify, render_template
from services.permission_store import group_by_resource

logger = logging.getLogger(__name__)

main_bp = Blueprint('main', __name__)


def get_injector():
    return current_app.extensions['permissions_injector']


@main_bp.route('/')
def index():
    return render_template('index.html', resource_name=None)


@main_bp.route('/pages/<resource_name>')
def page(resource_name):
    return render_template('page.html', resource_name=resource_name)


@main_bp.route('/pages/<resource_name>/script')
def page_script(resource_name):
    """Raw script block for pages rendered outside of Jinja"""
    try:
        script = get_injector().inject_as_javascript(resource_name)
        return current_app.response_class(script, mimetype='text/html')
    except Exception as e:
        logger.error(f"Error generating script for {resource_name}: {e}")
        logger.error(f"Script route traceback: {traceback.format_exc()}")
        return jsonify({'success': False, 'error': str(e)}), 500


@main_bp.route('/status')
def status():
    """Summary of the loaded permissions"""
    try:
        permissions = get_injector().permissions
        grouped = group_by_resource(permissions)
        return jsonify({
            'success': True,
            'permissions': len(permissions),
            'denied': sum(1 for p in permissions if not p.has_access),
            'resources': {name: len(items) for name, items in grouped.items()}
        })
    except Exception as e:
        logger.error(f"Error building status: {e}")
        return jsonify({'success': False, 'error': str(e)}), 500
