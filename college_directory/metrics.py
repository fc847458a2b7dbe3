from fastapi import APIRouter
from starlette.responses import Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST, Counter

router = APIRouter()

# incremented by the student routes
REGISTRATION_REQUESTS = Counter(
    "registration_requests_total", "Registration requests received"
)
REGISTRATION_SUCCESSES = Counter(
    "registration_success_total", "Students successfully registered"
)
LISTING_REQUESTS = Counter(
    "student_listing_requests_total", "Student listing requests received"
)


@router.get("/metrics", include_in_schema=False)
def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)
