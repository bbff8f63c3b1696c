from jobmail.api import (
    email_routes,
    compose_routes,
)

__all__ = [
    "email_routes",
    "compose_routes",
]
