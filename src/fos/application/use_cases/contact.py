from __future__ import annotations

import logging

from fos.application.dto.requests import ContactRequest
from fos.application.dto.responses import ContactResponse

logger = logging.getLogger(__name__)


class ContactFormIncompleteError(Exception):
    pass


class SubmitContactForm:
    def execute(self, request_dto: ContactRequest) -> ContactResponse:
        name = (request_dto.name or "").strip()
        email = (request_dto.email or "").strip()
        message = (request_dto.message or "").strip()
        if not name or not email or not message:
            raise ContactFormIncompleteError("All fields are required")

        logger.info(
            "contact_form_submission",
            extra={"contact_name": name, "contact_email": email, "contact_message": message},
        )
        return ContactResponse(success="Message received")
