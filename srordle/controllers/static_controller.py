"""
Static Controller

Serves the compiled frontend and its images when running locally. In
production these files are served by the front proxy instead.
"""

import os
from flask import Blueprint, abort, current_app, send_from_directory

static_bp = Blueprint('static_files', __name__)

FRONTEND_FILES = {
    '': 'index.html',
    'index.html': 'index.html',
    'index.js': 'index.js',
    'index.css': 'index.css',
}


def _abs(path: str) -> str:
    return os.path.abspath(path)


@static_bp.route('/', defaults={'filename': ''})
@static_bp.route('/<path:filename>')
def serve_frontend(filename):
    """Serve a compiled frontend artifact."""
    if filename not in FRONTEND_FILES:
        abort(404)
    return send_from_directory(_abs(current_app.config['STATIC_DIR']), FRONTEND_FILES[filename])


@static_bp.route('/images/<path:filename>')
def serve_image(filename):
    """Serve an image asset."""
    return send_from_directory(_abs(current_app.config['IMAGES_DIR']), filename)
