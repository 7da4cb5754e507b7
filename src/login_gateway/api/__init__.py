"""
login_gateway.api

API package for the login gateway service.

Responsibilities:
- FastAPI app factory and router modules.
- API-layer dependency wiring.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# The API layer should remain thin: request validation + delegation to the verifier
# + mapping outcomes to HTTP.
