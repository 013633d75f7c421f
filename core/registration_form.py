"""
Registration form state for new microloan clients.

Holds the three form sections and the two document images while a
client is being registered, validates them field by field and produces
the payload the clients API expects.
"""

import logging
from datetime import date, datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from core.date_utils import extract_date_from_datetime, format_iso_timestamp
from core.validators import (
    is_adult,
    is_known_district,
    is_valid_email,
    is_valid_monthly_income,
    is_valid_nic,
    is_valid_phone_number,
)
from schemas.registration import (
    EmploymentDetails,
    IdentityVerification,
    ImageFile,
    PersonalInfo,
    RegistrationData,
    ValidationErrors,
)

logger = logging.getLogger(__name__)

# wire section name -> attribute on RegistrationData / ValidationErrors
SECTIONS = {
    "personalInfo": "personal_info",
    "identityVerification": "identity_verification",
    "employmentDetails": "employment_details",
}

# image kind -> attribute on ValidationErrors
IMAGE_KINDS = {
    "idCard": "id_card_copy",
    "employmentLetter": "employment_letter_copy",
}

REQUIRED_MESSAGES = {
    "fullName": "Full name is required",
    "email": "Email is required",
    "contactNumber": "Contact number is required",
    "address": "Address is required",
    "district": "District is required",
    "idNumber": "ID number is required",
    "employer": "Company name is required",
    "jobRole": "Job role is required",
    "monthlyIncome": "Monthly income is required",
    "employmentDuration": "Employment duration is required",
}

IMAGE_REQUIRED_MESSAGES = {
    "idCard": "ID card copy is required",
    "employmentLetter": "Employment letter is required",
}


def _field_names(model: type[BaseModel]) -> dict[str, str]:
    """Map wire (alias) names to attribute names for a section model."""
    return {to_camel(name): name for name in model.model_fields}


SECTION_FIELDS = {
    "personalInfo": _field_names(PersonalInfo),
    "identityVerification": _field_names(IdentityVerification),
    "employmentDetails": _field_names(EmploymentDetails),
}


def _blank(value: str) -> bool:
    return not value.strip()


class RegistrationForm:
    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.data = RegistrationData()
        self.images: dict[str, ImageFile | None] = {kind: None for kind in IMAGE_KINDS}
        self.errors = ValidationErrors()
        self._image_rejections: dict[str, str] = {}
        self._invalid_date_of_birth = False
        self._validated = False

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def _section(self, section: str) -> BaseModel:
        if section not in SECTIONS:
            raise ValueError(f"Unknown form section: {section}")
        return getattr(self.data, SECTIONS[section])

    def _clear_error(self, section: str, field: str) -> None:
        getattr(self.errors, SECTIONS[section]).pop(field, None)

    def set_field(self, section: str, field: str, value) -> None:
        """Store a text field and clear its validation error."""
        model = self._section(section)
        if field == "dateOfBirth" and section == "personalInfo":
            self.set_date_of_birth(value)
            return
        attr = SECTION_FIELDS[section].get(field)
        if attr is None:
            raise ValueError(f"Unknown field {field} in section {section}")

        setattr(model, attr, "" if value is None else str(value))
        self._clear_error(section, field)
        self._validated = False

    def set_date_of_birth(self, value: date | datetime | str | None) -> None:
        parsed = extract_date_from_datetime(value)
        self._invalid_date_of_birth = value not in (None, "") and parsed is None
        self.data.personal_info.date_of_birth = parsed
        self._clear_error("personalInfo", "dateOfBirth")
        self._validated = False

    def attach_image(self, kind: str, image: ImageFile) -> None:
        if kind not in IMAGE_KINDS:
            raise ValueError(f"Unknown image kind: {kind}")
        self.images[kind] = image
        self._image_rejections.pop(kind, None)
        setattr(self.errors, IMAGE_KINDS[kind], None)
        self._validated = False

    def reject_image(self, kind: str, message: str) -> None:
        """Record why an uploaded image could not be accepted."""
        if kind not in IMAGE_KINDS:
            raise ValueError(f"Unknown image kind: {kind}")
        self.images[kind] = None
        self._image_rejections[kind] = message
        self._validated = False

    def load(self, data: dict) -> None:
        """Populate the sections from a submitted camelCase JSON object."""
        for section, fields in SECTION_FIELDS.items():
            values = data.get(section)
            if not isinstance(values, dict):
                continue
            for field in fields:
                if field in values:
                    self.set_field(section, field, values[field])

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------

    def validate(self, today: date | None = None) -> ValidationErrors:
        errors = ValidationErrors()
        personal = self.data.personal_info
        identity = self.data.identity_verification
        employment = self.data.employment_details

        # Personal info
        if _blank(personal.full_name):
            errors.personal_info["fullName"] = REQUIRED_MESSAGES["fullName"]

        if _blank(personal.email):
            errors.personal_info["email"] = REQUIRED_MESSAGES["email"]
        elif not is_valid_email(personal.email):
            errors.personal_info["email"] = "Please enter a valid email address"

        if _blank(personal.contact_number):
            errors.personal_info["contactNumber"] = REQUIRED_MESSAGES["contactNumber"]
        elif not is_valid_phone_number(personal.contact_number):
            errors.personal_info["contactNumber"] = "Please enter a valid Sri Lankan phone number"

        if self._invalid_date_of_birth:
            errors.personal_info["dateOfBirth"] = "Please enter a valid date of birth"
        elif personal.date_of_birth is None:
            errors.personal_info["dateOfBirth"] = "Date of birth is required"
        elif not is_adult(personal.date_of_birth, today=today):
            errors.personal_info["dateOfBirth"] = "You must be at least 18 years old"

        if _blank(personal.address):
            errors.personal_info["address"] = REQUIRED_MESSAGES["address"]

        if _blank(personal.district):
            errors.personal_info["district"] = REQUIRED_MESSAGES["district"]
        elif not is_known_district(personal.district):
            errors.personal_info["district"] = "Please select a valid district"

        # Identity verification
        if _blank(identity.id_number):
            errors.identity_verification["idNumber"] = REQUIRED_MESSAGES["idNumber"]
        elif not is_valid_nic(identity.id_number):
            errors.identity_verification["idNumber"] = "Please enter a valid Sri Lankan NIC number"

        # Employment details
        if _blank(employment.employer):
            errors.employment_details["employer"] = REQUIRED_MESSAGES["employer"]

        if _blank(employment.job_role):
            errors.employment_details["jobRole"] = REQUIRED_MESSAGES["jobRole"]

        if _blank(employment.monthly_income):
            errors.employment_details["monthlyIncome"] = REQUIRED_MESSAGES["monthlyIncome"]
        elif not is_valid_monthly_income(employment.monthly_income):
            errors.employment_details["monthlyIncome"] = "Please enter a valid monthly income"

        if _blank(employment.employment_duration):
            errors.employment_details["employmentDuration"] = REQUIRED_MESSAGES["employmentDuration"]

        # Images
        for kind, attr in IMAGE_KINDS.items():
            if kind in self._image_rejections:
                setattr(errors, attr, self._image_rejections[kind])
            elif self.images[kind] is None:
                setattr(errors, attr, IMAGE_REQUIRED_MESSAGES[kind])

        self.errors = errors
        self._validated = True
        if not errors.is_empty():
            logger.info(f"Registration form has errors in: {', '.join(self.error_fields())}")
        return errors

    @property
    def is_valid(self) -> bool:
        """True only once validate() has run and found nothing to report."""
        return self._validated and self.errors.is_empty()

    def error_fields(self) -> list[str]:
        fields = []
        for section, attr in SECTIONS.items():
            fields.extend(f"{section}.{field}" for field in getattr(self.errors, attr))
        for kind, attr in IMAGE_KINDS.items():
            if getattr(self.errors, attr) is not None:
                fields.append(kind)
        return fields

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_payload(self) -> dict:
        """JSON object sent as the `data` part of the registration request."""
        payload = self.data.model_dump(mode="json", by_alias=True)
        payload["personalInfo"]["dateOfBirth"] = format_iso_timestamp(
            self.data.personal_info.date_of_birth
        )
        return payload
