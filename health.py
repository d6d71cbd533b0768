from fastapi import APIRouter

router = APIRouter()

@router.get("/healthz")
def health_check():
    """
    Liveness probe.
    Used by load balancers and uptime monitors to confirm the process is up.
    """
    return {"ok": True}
