from flask import Blueprint, current_app, jsonify, request

from auth import load_current_user
from errors import AuthenticationRequired, AuthorizationDenied, MissingField, MissingUpload, NotFound
from forms import JobForm, ApplicationForm
from uploads import discard_resume, save_resume
import policies


def create_api_blueprint(storage):
    bp = Blueprint("api", __name__, url_prefix="/api")

    # ================= JOBS =================
    @bp.route("/jobs")
    def list_jobs():
        return jsonify([job.to_dict() for job in storage.get_all_jobs()])

    @bp.route("/jobs", methods=["POST"])
    def post_job():
        user = load_current_user(storage)
        if not policies.can_post_job(user):
            raise AuthorizationDenied("Only employers can post jobs")

        form = JobForm().validated()
        job = storage.create_job({
            "title": form.title.data,
            "description": form.description.data,
            "company": form.company.data,
            "location": form.location.data,
            "salary": form.salary.data or None,
            # Always the caller, whatever the body says
            "employer_id": user.id,
        })

        current_app.logger.info("Employer %s posted job %s", user.id, job.id)
        return jsonify(job.to_dict()), 201

    @bp.route("/jobs/<int:job_id>")
    def get_job(job_id):
        job = storage.get_job(job_id)
        if job is None:
            raise NotFound("Job not found")
        return jsonify(job.to_dict())

    # ================= APPLY =================
    @bp.route("/jobs/<int:job_id>/apply", methods=["POST"])
    def apply_job(job_id):
        user = load_current_user(storage)
        if not policies.can_apply(user):
            raise AuthorizationDenied("Only job seekers can apply to jobs")

        if storage.get_job(job_id) is None:
            raise NotFound("Job not found")

        resume = request.files.get("resume")
        if resume is None or not resume.filename:
            raise MissingUpload()

        form = ApplicationForm().validated()
        resume_url = save_resume(
            resume,
            current_app.config["UPLOAD_FOLDER"],
            current_app.config.get("RESUME_EXTENSIONS"),
        )

        try:
            application = storage.create_application({
                "job_id": job_id,
                "user_id": user.id,
                "resume_url": resume_url,
                "cover_letter": form.cover_letter.data or None,
            })
        except Exception:
            discard_resume(resume_url)
            raise

        current_app.logger.info("User %s applied to job %s (application %s)", user.id, job_id, application.id)
        return jsonify(application.to_dict()), 201

    # ================= APPLICATIONS =================
    @bp.route("/applications")
    def list_applications():
        user = load_current_user(storage)
        if not policies.is_authenticated(user):
            raise AuthenticationRequired()

        scope = policies.application_scope(user)
        if scope == policies.OWN_APPLICATIONS:
            applications = storage.get_user_applications(user.id)
        elif scope == policies.EMPLOYER_JOBS:
            applications = []
            for job in storage.get_all_jobs():
                if policies.owns_job(user, job):
                    applications.extend(storage.get_job_applications(job.id))
        else:
            raise AuthorizationDenied("Invalid role")

        return jsonify([application.to_dict() for application in applications])

    @bp.route("/applications/<int:application_id>/status", methods=["PATCH"])
    def update_application_status(application_id):
        user = load_current_user(storage)
        if not policies.can_update_status(user):
            raise AuthorizationDenied("Only employers can update application status")

        body = request.get_json(silent=True) or {}
        status = body.get("status") if isinstance(body, dict) else None
        if not status:
            raise MissingField("Status is required")

        if current_app.config.get("ENFORCE_STATUS_OWNERSHIP"):
            application = storage.get_application(application_id)
            if application is None:
                raise NotFound("Application not found")
            job = storage.get_job(application.job_id)
            if not policies.can_update_status(user, job, enforce_ownership=True):
                raise AuthorizationDenied("Only the job's employer can update this application")

        application = storage.update_application_status(application_id, str(status))
        if application is None:
            raise NotFound("Application not found")

        current_app.logger.info(
            "Employer %s set application %s to %s", user.id, application.id, application.status
        )
        return jsonify(application.to_dict())

    return bp
