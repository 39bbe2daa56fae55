import os
import tempfile

# Settings are read at import time, so they must be in place before the app is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["AUTH_JWT_SECRET"] = "test-secret"
os.environ["AUTH_AUDIENCE"] = "authenticated"
os.environ.pop("AUTH_JWKS_URL", None)
os.environ.pop("AUTH_ISSUER", None)
os.environ["FARM_TIMEZONE"] = "Asia/Jakarta"
os.environ["LOG_DIR"] = os.path.join(tempfile.gettempdir(), "poultry-ledger-test-logs")
