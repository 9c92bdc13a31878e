import os

from flask import Flask

from auth import create_auth_blueprint
from config import Config
from errors import register_error_handlers
from logger import configure_logging
from routes import create_api_blueprint
from storage import DatabaseStorage
from uploads import create_uploads_blueprint


def create_app(overrides=None, storage=None):
    """Build the job board app.

    ``storage`` is created here unless one is passed in, then handed to
    each blueprint factory so handlers never reach for a global.
    """
    # ================= APP =================
    app = Flask(__name__)
    app.config["PREFERRED_URL_SCHEME"] = "https"
    app.config.from_object(Config)
    if overrides:
        app.config.update(overrides)

    configure_logging(app)

    # ================= DATABASE + SESSIONS =================
    storage = storage or DatabaseStorage()
    storage.init_app(app)
    app.extensions["job_board_storage"] = storage

    # ================= RESUME UPLOAD =================
    os.makedirs(app.config["UPLOAD_FOLDER"], exist_ok=True)

    # ================= ROUTES =================
    app.register_blueprint(create_auth_blueprint(storage))
    app.register_blueprint(create_api_blueprint(storage))
    app.register_blueprint(create_uploads_blueprint(storage))
    register_error_handlers(app)

    app.logger.info("Job board ready (database: %s)", app.config["SQLALCHEMY_DATABASE_URI"].split("://", 1)[0])
    return app


# ================= RUN =================
if __name__ == "__main__":
    port = int(os.environ.get("PORT", 5000))
    create_app().run(host="0.0.0.0", port=port)
