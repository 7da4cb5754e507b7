"""
login_gateway.auth

Authentication package.

Responsibilities:
- Verdict types returned by verification.
- The `Verifier` that checks a (principal, secret) pair against a credential store.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Nothing here knows about HTTP; status code mapping lives in `api.routers.login`.
