from flask import Blueprint, current_app, g, jsonify, session
from werkzeug.security import generate_password_hash, check_password_hash

from errors import AuthenticationRequired, JobBoardError
from forms import RegisterForm, LoginForm
from models import JOB_SEEKER


class InvalidCredentials(AuthenticationRequired):
    message = "Invalid username or password"


class UsernameTaken(JobBoardError):
    status_code = 400
    message = "Username already exists"


def load_current_user(storage):
    """User attached to this request's session, or ``None``."""
    if "current_user" not in g:
        user_id = session.get("user_id")
        g.current_user = storage.get_user(user_id) if user_id is not None else None
    return g.current_user


def login_user(user):
    session.clear()
    session["user_id"] = user.id
    session["username"] = user.username
    g.current_user = user


def logout_user():
    session.clear()
    g.current_user = None


def create_auth_blueprint(storage):
    bp = Blueprint("auth", __name__, url_prefix="/api")

    # ================= REGISTER =================
    @bp.route("/register", methods=["POST"])
    def register():
        form = RegisterForm().validated()

        if storage.get_user_by_username(form.username.data):
            raise UsernameTaken()

        user = storage.create_user({
            "username": form.username.data,
            "password": generate_password_hash(form.password.data),
            "email": form.email.data,
            "role": form.role.data or JOB_SEEKER,
            "company_name": form.company_name.data or None,
        })
        login_user(user)

        current_app.logger.info("Registered user %s (%s)", user.username, user.role)
        return jsonify(user.to_dict()), 201

    # ================= LOGIN =================
    @bp.route("/login", methods=["POST"])
    def login():
        form = LoginForm().validated()
        user = storage.get_user_by_username(form.username.data)

        if user is None or not check_password_hash(user.password, form.password.data):
            current_app.logger.warning("Failed login for %s", form.username.data)
            raise InvalidCredentials()

        login_user(user)
        current_app.logger.info("User %s logged in", user.username)
        return jsonify(user.to_dict())

    # ================= LOGOUT =================
    @bp.route("/logout", methods=["POST"])
    def logout():
        logout_user()
        return "OK", 200

    @bp.route("/user")
    def current_user():
        user = load_current_user(storage)
        if user is None:
            raise AuthenticationRequired()
        return jsonify(user.to_dict())

    return bp
