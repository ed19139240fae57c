"""Global pytest configuration."""

import os

# Force the offline stub client for tests before any imports
os.environ["GEMINI_API_KEY"] = ""
