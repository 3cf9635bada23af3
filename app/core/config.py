# /app/core/config.py

"""
Process configuration for the code generator backend.

Values are read once from the environment (and an optional `.env` file in
the working directory) when this module is first imported. Nothing here is
validated beyond presence; the services that consume a value decide what
to do when it is missing.
"""

import os
from dotenv import load_dotenv

load_dotenv()

# --- Upstream (Gemini) ---
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-2.0-flash")

# --- Persistence ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./codegen.db")
AUTO_CREATE_TABLES = os.getenv("AUTO_CREATE_TABLES", "true").lower() == "true"

# --- HTTP Server ---
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "3001"))
PUBLIC_API_URL = os.getenv("PUBLIC_API_URL", f"http://localhost:{PORT}")
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]

# --- Logging ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
