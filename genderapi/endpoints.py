"""
Operation registry

One OperationSpec per service operation. Flag defaults of False match what the
service assumes; country is only sent when given.
"""
from typing import Dict

from genderapi.types import Endpoint, FieldSpec, OperationSpec

COUNTRY = FieldSpec("country", "country")
ASK_TO_AI = FieldSpec("ask_to_ai", "askToAI", default=False)
FORCE_TO_GENDERIZE = FieldSpec("force_to_genderize", "forceToGenderize", default=False)
BULK_DATA = FieldSpec("data", "data", required=True, sequence=True)

NAME = OperationSpec(
    name="get_gender_by_name",
    path=Endpoint.NAME,
    fields=(FieldSpec("name", "name", required=True), COUNTRY, ASK_TO_AI, FORCE_TO_GENDERIZE),
)

EMAIL = OperationSpec(
    name="get_gender_by_email",
    path=Endpoint.EMAIL,
    fields=(FieldSpec("email", "email", required=True), COUNTRY, ASK_TO_AI),
)

USERNAME = OperationSpec(
    name="get_gender_by_username",
    path=Endpoint.USERNAME,
    fields=(FieldSpec("username", "username", required=True), COUNTRY, ASK_TO_AI, FORCE_TO_GENDERIZE),
)

NAME_BULK = OperationSpec(
    name="get_gender_by_name_bulk",
    path=Endpoint.NAME_BULK,
    fields=(BULK_DATA,),
    max_items=100,
)

EMAIL_BULK = OperationSpec(
    name="get_gender_by_email_bulk",
    path=Endpoint.EMAIL_BULK,
    fields=(BULK_DATA,),
    max_items=50,
)

USERNAME_BULK = OperationSpec(
    name="get_gender_by_username_bulk",
    path=Endpoint.USERNAME_BULK,
    fields=(BULK_DATA,),
    max_items=50,
)

OPERATIONS: Dict[str, OperationSpec] = {
    spec.name: spec for spec in (NAME, EMAIL, USERNAME, NAME_BULK, EMAIL_BULK, USERNAME_BULK)
}


def get_operation(name: str) -> OperationSpec:
    """Look up an operation by method name"""
    try:
        return OPERATIONS[name]
    except KeyError:
        raise KeyError(f"Unknown operation: {name}. Available: {', '.join(sorted(OPERATIONS))}") from None
