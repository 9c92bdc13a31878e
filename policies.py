"""Authorization policies, one per endpoint.

Each policy takes the requesting user (``None`` when anonymous) plus any
resource it needs and answers allow/deny. Handlers translate a denial
into the matching HTTP error; nothing here touches Flask.
"""

from models import EMPLOYER, JOB_SEEKER

# Application list scopes
OWN_APPLICATIONS = "own"
EMPLOYER_JOBS = "employer_jobs"


def is_authenticated(user):
    return user is not None


def can_post_job(user):
    return user is not None and user.role == EMPLOYER


def can_apply(user):
    return user is not None and user.role == JOB_SEEKER


def application_scope(user):
    """Which applications ``user`` may list, or ``None`` if none at all."""
    if user is None:
        return None
    if user.role == JOB_SEEKER:
        return OWN_APPLICATIONS
    if user.role == EMPLOYER:
        return EMPLOYER_JOBS
    return None


def owns_job(user, job):
    return user is not None and job is not None and job.employer_id == user.id


def can_update_status(user, job=None, enforce_ownership=False):
    """Any employer may triage any application unless ownership is enforced.

    With ``enforce_ownership`` the employer must own ``job``, the posting
    the application was made against.
    """
    if user is None or user.role != EMPLOYER:
        return False
    if enforce_ownership:
        return owns_job(user, job)
    return True


def can_view_resume(user, application, job=None):
    """Only the applicant and the employer who owns the job may read a resume."""
    if user is None or application is None:
        return False
    return application.user_id == user.id or owns_job(user, job)
