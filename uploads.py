import os
import uuid

from flask import Blueprint, current_app, send_from_directory
from werkzeug.utils import secure_filename

from auth import load_current_user
from errors import AuthenticationRequired, AuthorizationDenied, NotFound, ValidationFailed
import policies


def allowed_file(filename, extensions=None):
    """An empty ``extensions`` set accepts any file name."""
    if not extensions:
        return bool(filename)
    return "." in filename and filename.rsplit(".", 1)[1].lower() in extensions


def save_resume(resume, folder, extensions=None):
    """Write an uploaded resume under a unique name and return its path."""
    if not allowed_file(resume.filename, extensions):
        allowed = ", ".join(sorted(extensions or ()))
        raise ValidationFailed({"resume": [f"Allowed file types: {allowed}"]})

    os.makedirs(folder, exist_ok=True)
    filename = secure_filename(resume.filename) or "resume"
    path = os.path.join(folder, f"{uuid.uuid4().hex}_{filename}")
    resume.save(path)
    return path


def discard_resume(path):
    """Remove a stored resume whose application was never saved."""
    if os.path.exists(path):
        os.remove(path)


def create_uploads_blueprint(storage):
    bp = Blueprint("uploads", __name__)

    @bp.route("/uploads/<path:filename>")
    def uploaded_file(filename):
        user = load_current_user(storage)
        if user is None:
            raise AuthenticationRequired()

        folder = current_app.config["UPLOAD_FOLDER"]
        application = storage.get_application_by_resume(os.path.join(folder, filename))
        if application is None:
            raise NotFound("Resume not found")

        job = storage.get_job(application.job_id)
        if not policies.can_view_resume(user, application, job):
            raise AuthorizationDenied("Not allowed to view this resume")

        return send_from_directory(os.path.abspath(folder), filename)

    return bp
