from flask_session import Session

from models import db, User, Job, Application

JOB_FIELDS = ("title", "description", "company", "location", "salary", "employer_id")
APPLICATION_FIELDS = ("job_id", "user_id", "status", "resume_url", "cover_letter")
USER_FIELDS = ("username", "password", "email", "role", "company_name")


def _pick(data, fields):
    return {key: data[key] for key in fields if key in data}


class DatabaseStorage:
    """Record-level persistence for users, jobs and applications.

    Also owns the server-side session store, which lives in the same
    database in a ``sessions`` table created on first run.

    Fetch-by-id methods return ``None`` when no row matches. Every write
    is a single-row operation committed on its own.
    """

    def __init__(self, database=db):
        self.db = database
        self.session_store = Session()

    def init_app(self, app):
        app.config.setdefault("SESSION_TYPE", "sqlalchemy")
        app.config.setdefault("SESSION_SQLALCHEMY_TABLE", "sessions")
        app.config["SESSION_SQLALCHEMY"] = self.db

        # Flask-Session declares its table on every app it is set up for;
        # forget an earlier app's declaration so it can be declared again
        table = self.db.metadata.tables.get(app.config["SESSION_SQLALCHEMY_TABLE"])
        if table is not None:
            self.db.metadata.remove(table)

        self.db.init_app(app)
        with app.app_context():
            self.db.create_all()
        self.session_store.init_app(app)

    def _save(self, record):
        self.db.session.add(record)
        self.db.session.commit()
        return record

    # ================= USERS =================
    def get_user(self, user_id):
        return self.db.session.get(User, user_id)

    def get_user_by_username(self, username):
        return User.query.filter_by(username=username).first()

    def create_user(self, data):
        return self._save(User(**_pick(data, USER_FIELDS)))

    # ================= JOBS =================
    def create_job(self, data):
        return self._save(Job(**_pick(data, JOB_FIELDS)))

    def get_job(self, job_id):
        return self.db.session.get(Job, job_id)

    def get_all_jobs(self):
        return Job.query.order_by(Job.id).all()

    def update_job(self, job_id, changes):
        job = self.get_job(job_id)
        if job is None:
            return None
        for key, value in _pick(changes, JOB_FIELDS).items():
            setattr(job, key, value)
        self.db.session.commit()
        return job

    def delete_job(self, job_id):
        # Applications on the job are left in place
        Job.query.filter_by(id=job_id).delete()
        self.db.session.commit()
        return True

    # ================= APPLICATIONS =================
    def create_application(self, data):
        return self._save(Application(**_pick(data, APPLICATION_FIELDS)))

    def get_application(self, application_id):
        return self.db.session.get(Application, application_id)

    def get_application_by_resume(self, resume_url):
        return Application.query.filter_by(resume_url=resume_url).first()

    def get_user_applications(self, user_id):
        return Application.query.filter_by(user_id=user_id).order_by(Application.id).all()

    def get_job_applications(self, job_id):
        return Application.query.filter_by(job_id=job_id).order_by(Application.id).all()

    def update_application_status(self, application_id, status):
        application = self.get_application(application_id)
        if application is None:
            return None
        application.status = status
        self.db.session.commit()
        return application
