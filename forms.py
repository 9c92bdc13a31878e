from flask import request
from flask_wtf import FlaskForm
from wtforms import StringField, PasswordField, TextAreaField
from wtforms.validators import DataRequired, Email, Length, Optional, AnyOf

from errors import ValidationFailed
from models import ROLES, JOB_SEEKER


def as_text(value):
    # JSON bodies may carry numbers where a text column is expected
    if value is None or isinstance(value, str):
        return value
    return str(value)


class ApiForm(FlaskForm):
    """Base form for JSON and multipart request bodies.

    Flask-WTF picks up ``request.get_json()`` or ``request.form`` on its own,
    so subclasses only declare fields. CSRF is off because the API is
    called with fetch/XHR rather than rendered forms.
    """

    class Meta:
        csrf = False

    def __init__(self, *args, **kwargs):
        # Flask-WTF only understands a JSON object as form data
        if request.is_json and not isinstance(request.get_json(silent=True), dict):
            raise ValidationFailed({"body": ["Expected a JSON object"]})
        super().__init__(*args, **kwargs)

    def validated(self):
        if not self.validate():
            raise ValidationFailed(self.errors)
        return self


class RegisterForm(ApiForm):
    username = StringField("Username", filters=[as_text], validators=[DataRequired(), Length(min=3, max=150)])
    password = PasswordField("Password", filters=[as_text], validators=[DataRequired(), Length(min=6)])
    email = StringField("Email", filters=[as_text], validators=[DataRequired(), Email()])
    role = StringField("Role", default=JOB_SEEKER, filters=[as_text], validators=[Optional(), AnyOf(ROLES)])
    company_name = StringField(
        "Company Name", name="companyName", filters=[as_text], validators=[Optional(), Length(max=200)]
    )


class LoginForm(ApiForm):
    username = StringField("Username", filters=[as_text], validators=[DataRequired()])
    password = PasswordField("Password", filters=[as_text], validators=[DataRequired()])


class JobForm(ApiForm):
    title = StringField("Job Title", filters=[as_text], validators=[DataRequired(), Length(max=200)])
    description = TextAreaField("Job Description", filters=[as_text], validators=[DataRequired()])
    company = StringField("Company", filters=[as_text], validators=[DataRequired(), Length(max=200)])
    location = StringField("Location", filters=[as_text], validators=[DataRequired(), Length(max=100)])
    salary = StringField("Salary", filters=[as_text], validators=[Optional(), Length(max=100)])


class ApplicationForm(ApiForm):
    cover_letter = TextAreaField("Cover Letter", name="coverLetter", filters=[as_text], validators=[Optional()])
