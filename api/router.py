from fastapi import APIRouter
from api.routes import dashboard, registration

api_router = APIRouter()

api_router.include_router(dashboard.router, prefix="/dashboard", tags=["Dashboard"])
# Dashboard routes (prefix: /dashboard):
# - GET /{user_id} - Client profile with loan/EMI status (no caching)

api_router.include_router(registration.router, prefix="/registration", tags=["Registration"])
# Registration routes (prefix: /registration):
# - POST "" - Validate and submit a client registration (multipart: data, idCard, employmentLetter)
# - POST /validate - Validate only, returns per-field errors
# - GET /districts - Districts offered by the registration form
