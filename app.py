# =========================================================
# app.py — Punto de entrada principal del microservicio Flask
# =========================================================
import logging
from flask import Flask, request, current_app
from blueprints.timestamp_bp import timestamp_bp
from config import Config


# =========================================================
# Logging
# =========================================================

def configure_logging(app):
    """Aplica LOG_LEVEL al logger de la app y al de werkzeug."""
    level = app.config['LOG_LEVEL']
    app.logger.setLevel(level)
    logging.getLogger('werkzeug').setLevel(level)


def trace_request(response):
    """Traza de cada petición (método, ruta y status)."""
    current_app.logger.debug(f"{request.method} {request.full_path.rstrip('?')} -> {response.status_code}")
    return response


# =========================================================
# Fábrica de la app
# =========================================================

def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)

    configure_logging(app)

    # Registro de Blueprints
    app.register_blueprint(timestamp_bp)

    @app.route('/')
    def index():
        return '<h1>Hello World!</h1>'

    @app.errorhandler(404)
    def not_found(error):
        """404 sin cuerpo."""
        return '', 404

    app.after_request(trace_request)
    return app


def main():
    app = create_app(Config)
    host, port = app.config['HOST'], app.config['PORT']
    app.logger.info(f"listening on http://{host}:{port}")
    app.run(host=host, port=port, debug=app.config['DEBUG'])


# =========================================================
# ▶Ejecución directa
# =========================================================

if __name__ == '__main__':
    main()
