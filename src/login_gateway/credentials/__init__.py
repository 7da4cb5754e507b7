"""
login_gateway.credentials

Credential store adapters.

Responsibilities:
- Define the `CredentialStore` seam the verifier depends on.
- Provide in-memory, SQL and HTTP-directory implementations.
"""

# Package marker; implementations are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Hashing, salting and persistence details stay inside this package; the verifier
# only sees `lookup` / `matches`.
