from datetime import date

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Snake_case attributes, camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PersonalInfo(CamelModel):
    full_name: str = ""
    contact_number: str = ""
    email: str = ""
    date_of_birth: date | None = None
    address: str = ""
    district: str = ""


class IdentityVerification(CamelModel):
    id_number: str = ""


class EmploymentDetails(CamelModel):
    employer: str = ""
    job_role: str = ""
    monthly_income: str = ""
    employment_duration: str = ""


class RegistrationData(CamelModel):
    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    identity_verification: IdentityVerification = Field(default_factory=IdentityVerification)
    employment_details: EmploymentDetails = Field(default_factory=EmploymentDetails)


class ImageFile(BaseModel):
    filename: str
    content_type: str
    content: bytes


class ValidationErrors(CamelModel):
    """Per-field messages; keys inside each section use the wire field names."""
    personal_info: dict[str, str] = Field(default_factory=dict)
    identity_verification: dict[str, str] = Field(default_factory=dict)
    employment_details: dict[str, str] = Field(default_factory=dict)
    id_card_copy: str | None = None
    employment_letter_copy: str | None = None

    def is_empty(self) -> bool:
        return (
            not self.personal_info
            and not self.identity_verification
            and not self.employment_details
            and self.id_card_copy is None
            and self.employment_letter_copy is None
        )


class ValidationResult(BaseModel):
    valid: bool
    errors: ValidationErrors
