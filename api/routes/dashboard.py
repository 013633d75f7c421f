import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from core.clients_api import ClientsAPI, ClientsAPIError, upstream_error_to_http
from core.dependencies import get_clients_api
from core.loan_preview import get_loan_summary, get_recent_activity
from schemas.dashboard import ClientProfile, DashboardResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/{user_id}", response_model=DashboardResponse)
def get_dashboard(
    user_id: str,
    response: Response,
    api: ClientsAPI = Depends(get_clients_api),
) -> DashboardResponse:
    """
    Dashboard for a client: profile from the clients API plus loan/EMI status.
    Always fetched fresh; pull-to-refresh calls this again.
    """
    try:
        body = api.get_client(user_id)
    except ClientsAPIError as e:
        logger.error(f"Error fetching client {user_id}: {e.message}")
        raise upstream_error_to_http(e)

    user = body.get("data") if isinstance(body, dict) else None
    personal_info = user.get("personalInfo") if isinstance(user, dict) else None
    if (
        not isinstance(personal_info, dict)
        or not isinstance(personal_info.get("fullName"), str)
        or not personal_info["fullName"].strip()
        or not isinstance(personal_info.get("email"), (str, type(None)))
    ):
        logger.error(f"Client record for {user_id} has no personal info: {body}")
        raise HTTPException(
            status_code=502,
            detail={"title": "Error", "message": "Client record is unavailable"},
        )

    response.headers["Cache-Control"] = "no-store"
    return DashboardResponse(
        client=ClientProfile(
            user_id=user_id,
            full_name=personal_info["fullName"],
            email=personal_info.get("email"),
        ),
        loan=get_loan_summary(),
        activity=get_recent_activity(),
    )
