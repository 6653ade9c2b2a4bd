"""Blueprint registration."""

from __future__ import annotations


def register_blueprints(app):
    # Import locally to avoid import-time side effects / circular imports.
    from .files import bp as files_bp
    from .names import bp as names_bp
    from .stats import bp as stats_bp
    from .top import bp as top_bp
    from .system import bp as system_bp

    app.register_blueprint(files_bp)
    app.register_blueprint(names_bp)
    app.register_blueprint(stats_bp)
    app.register_blueprint(top_bp)
    app.register_blueprint(system_bp)
