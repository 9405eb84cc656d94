# Root conftest.py - MUST be at project root to load .env before test collection.
# This file is loaded by pytest before any test modules are imported, and its
# directory is put on sys.path so `proplogic` imports without an install.

# Load environment variables FIRST, before any other imports, so a
# PROPLOGIC_CONFIG set in .env is visible to proplogic.config.
from dotenv import load_dotenv
load_dotenv()
