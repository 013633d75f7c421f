from schemas.registration import CamelModel


class ClientProfile(CamelModel):
    user_id: str
    full_name: str
    email: str | None = None


class LoanSummary(CamelModel):
    current_loan: int
    current_loan_display: str
    emi_amount: int
    emi_amount_display: str
    due_date: str
    next_due_date: str


class ActivityItem(CamelModel):
    type: str
    status: str
    amount: str
    date: str
    tone: str


class DashboardResponse(CamelModel):
    client: ClientProfile
    loan: LoanSummary
    activity: list[ActivityItem]
