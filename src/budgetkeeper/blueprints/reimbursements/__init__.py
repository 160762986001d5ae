"""Pending reimbursements blueprint package."""

from __future__ import annotations

from flask import Blueprint

bp = Blueprint("reimbursements", __name__, url_prefix="/api/reimbursements")

from . import routes  # noqa: E402,F401 - ensure routes get registered

__all__ = ["bp"]
