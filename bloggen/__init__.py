# bloggen/__init__.py
from flask import Flask
from flask_cors import CORS
from flask_sqlalchemy import SQLAlchemy
from loguru import logger

db = SQLAlchemy()


def create_app(overrides=None, chat=None):
    """
    Application factory.

    overrides -- config values applied on top of the environment
    chat      -- inference backend; built from config when omitted
    """
    from dotenv import load_dotenv; load_dotenv()
    from .config import load_config
    from .log import setup_logging

    app = Flask(__name__, static_folder="public", static_url_path="")
    app.config.update(load_config())
    app.config.update(overrides or {})
    setup_logging(app.config["LOG_LEVEL"])

    if not app.config["SQLALCHEMY_DATABASE_URI"].startswith("sqlite"):
        # keep pooled connections from going stale on managed Postgres
        app.config.setdefault("SQLALCHEMY_ENGINE_OPTIONS", {"pool_pre_ping": True, "pool_recycle": 300})

    db.init_app(app)
    CORS(app)

    # models must be imported before create_all
    from .models import BlogPost  # noqa: F401

    with app.app_context():
        try:
            db.create_all()
            logger.info("database ready")
        except Exception as e:
            logger.warning("db.create_all skipped: {}", e)

    from .generator import EXTENSION_KEY, make_chat
    app.extensions[EXTENSION_KEY] = chat or make_chat(app.config)

    from .blog import blog_bp
    app.register_blueprint(blog_bp)

    from .diagnose import diagnose_bp
    app.register_blueprint(diagnose_bp)

    @app.get("/")
    def index():
        return app.send_static_file("index.html")

    @app.get("/healthz")
    def healthz():
        return {"ok": True}

    return app
