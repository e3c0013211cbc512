"""
FastAPI dependencies.

The application factory stores one ``ContactService``, one
``ViewInvalidator`` and the ``ContactActions`` built from them on
``app.state``; these helpers hand them to the route handlers.
"""

from fastapi import Request

from contact_manager_api.app.actions.contact_actions import ContactActions
from contact_manager_api.app.core.views import ViewInvalidator
from contact_manager_api.app.services.contact_service import ContactService


def get_contact_service(request: Request) -> ContactService:
    return request.app.state.contact_service


def get_contact_actions(request: Request) -> ContactActions:
    return request.app.state.contact_actions


def get_view_invalidator(request: Request) -> ViewInvalidator:
    return request.app.state.views
