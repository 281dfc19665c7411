from flask import Blueprint

waitlist_bp = Blueprint('waitlist', __name__)

from . import routes  # noqa: E402,F401
