"""
login_gateway.db

Persistence package (SQLAlchemy async) backing the SQL credential store.

Responsibilities:
- Provide the ORM model, engine/session setup and table bootstrap.
"""

# Package marker.


# --- Module Notes -----------------------------------------------------------
# Only `credentials.sql` talks to this package; the verifier and API never do.
