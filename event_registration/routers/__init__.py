from event_registration.routers.healthz.router import router as healthz

__all__ = [
    "healthz",
]
