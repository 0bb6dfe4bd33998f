from flask import Flask, jsonify

from .config import Config
from .extensions import cors, init_processor

def create_app(config_object=Config, processor=None):
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)
    app.json.sort_keys = app.config.get("JSON_SORT_KEYS", False)
    config_object.init_app(app)

    # Init extensions
    cors.init_app(
        app,
        resources={r"/api/*": {"origins": app.config["CORS_ORIGIN"]}},
        methods=["POST", "OPTIONS"],
        allow_headers=["Content-Type"],
        max_age=86400,
    )
    init_processor(app, processor)

    # Register blueprints
    from .checkout import bp as checkout_bp; app.register_blueprint(checkout_bp)
    from .redirect import bp as redirect_bp; app.register_blueprint(redirect_bp)

    from .errors import register_error_handlers
    register_error_handlers(app)

    from .cli import register_cli
    register_cli(app)

    @app.get("/")
    def health():
        return jsonify(ok=True, msg="API running")

    return app
