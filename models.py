from flask_sqlalchemy import SQLAlchemy
from sqlalchemy.sql import func

db = SQLAlchemy()

# Roles
ADMIN = "ADMIN"
EMPLOYER = "EMPLOYER"
JOB_SEEKER = "JOB_SEEKER"
ROLES = (ADMIN, EMPLOYER, JOB_SEEKER)

# Application statuses
PENDING = "PENDING"
ACCEPTED = "ACCEPTED"
REJECTED = "REJECTED"
STATUSES = (PENDING, ACCEPTED, REJECTED)


def _isoformat(value):
    return value.isoformat() if value is not None else None


class User(db.Model):
    __tablename__ = "users"

    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(150), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(120), nullable=False)
    role = db.Column(db.String(20), nullable=False, default=JOB_SEEKER)
    # Only meaningful for employers
    company_name = db.Column(db.String(200))

    def to_dict(self):
        # The password hash never leaves the server
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "role": self.role,
            "companyName": self.company_name,
        }


class Job(db.Model):
    __tablename__ = "jobs"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    description = db.Column(db.Text, nullable=False)
    company = db.Column(db.String(200), nullable=False)
    location = db.Column(db.String(100), nullable=False)
    salary = db.Column(db.String(100))
    employer_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, server_default=func.now())

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "company": self.company,
            "location": self.location,
            "salary": self.salary,
            "employerId": self.employer_id,
            "createdAt": _isoformat(self.created_at),
        }


class Application(db.Model):
    __tablename__ = "applications"

    id = db.Column(db.Integer, primary_key=True)
    # Plain column: deleting a job leaves its applications behind
    job_id = db.Column(db.Integer, nullable=False, index=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    status = db.Column(db.Text, nullable=False, default=PENDING)
    resume_url = db.Column(db.String(255), nullable=False)
    cover_letter = db.Column(db.Text)
    applied_at = db.Column(db.DateTime, nullable=False, server_default=func.now())

    def to_dict(self):
        return {
            "id": self.id,
            "jobId": self.job_id,
            "userId": self.user_id,
            "status": self.status,
            "resumeUrl": self.resume_url,
            "coverLetter": self.cover_letter,
            "appliedAt": _isoformat(self.applied_at),
        }
