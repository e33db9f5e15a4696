from __future__ import annotations

from fastapi import APIRouter, Depends

from fos.api.dependencies import contact_use_case
from fos.application.dto.requests import ContactRequest
from fos.application.dto.responses import ContactResponse
from fos.application.use_cases.contact import SubmitContactForm

router = APIRouter(prefix="/api")


@router.post("/contact", response_model=ContactResponse)
def submit_contact_form(
    request_dto: ContactRequest,
    use_case: SubmitContactForm = Depends(contact_use_case),
) -> ContactResponse:
    return use_case.execute(request_dto)
