import json
import logging

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from core.clients_api import ClientsAPI, ClientsAPIError, upstream_error_to_http
from core.dependencies import get_clients_api
from core.file_utils import UploadRejected, read_image_upload
from core.registration_form import RegistrationForm
from core.validators import DISTRICTS
from schemas.registration import ValidationResult

logger = logging.getLogger(__name__)
router = APIRouter()


def _build_form(data: str, id_card: UploadFile | None, employment_letter: UploadFile | None) -> RegistrationForm:
    """Load submitted sections and documents into a validated form."""
    try:
        submitted = json.loads(data)
    except ValueError:
        submitted = None
    if not isinstance(submitted, dict):
        raise HTTPException(status_code=400, detail="Invalid registration data")

    form = RegistrationForm()
    form.load(submitted)

    for kind, upload in (("idCard", id_card), ("employmentLetter", employment_letter)):
        try:
            image = read_image_upload(upload, kind)
        except UploadRejected as e:
            logger.warning(f"Rejected {kind} upload: {e.message}")
            form.reject_image(kind, e.message)
            continue
        if image is not None:
            form.attach_image(kind, image)

    form.validate()
    return form


@router.post("", status_code=201)
def register_client(
    data: str = Form(...),
    id_card: UploadFile = File(None, alias="idCard"),
    employment_letter: UploadFile = File(None, alias="employmentLetter"),
    api: ClientsAPI = Depends(get_clients_api),
) -> dict:
    """
    Validate a client registration and forward it to the clients API.
    Nothing is sent upstream unless every field and both documents pass.
    """
    form = _build_form(data, id_card, employment_letter)
    if not form.is_valid:
        raise HTTPException(
            status_code=422,
            detail={
                "title": "Validation Error",
                "message": "Please fill all required fields correctly",
                "errors": form.errors.model_dump(by_alias=True, exclude_none=True),
            },
        )

    try:
        ack = api.register(
            form.to_payload(),
            form.images["idCard"],
            form.images["employmentLetter"],
        )
    except ClientsAPIError as e:
        logger.error(f"Client registration failed: {e.message}")
        raise upstream_error_to_http(e)

    logger.info(f"Client registered: NIC {form.data.identity_verification.id_number}")
    return {
        "title": "Success",
        "message": "Client registered successfully!",
        "response": ack,
    }


@router.post("/validate", response_model=ValidationResult, response_model_exclude_none=True)
def validate_registration(
    data: str = Form(...),
    id_card: UploadFile = File(None, alias="idCard"),
    employment_letter: UploadFile = File(None, alias="employmentLetter"),
) -> ValidationResult:
    """Check a registration without submitting it, for inline field errors."""
    form = _build_form(data, id_card, employment_letter)
    return ValidationResult(valid=form.is_valid, errors=form.errors)


@router.get("/districts")
def list_districts() -> list:
    return list(DISTRICTS)
