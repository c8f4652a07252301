"""
Central configuration

Purpose: single source of truth for the LLM endpoint, API key, model name, request limits and server params.

Input: environment variables (optionally from a .env file next to this module).

Output: variables used by other modules (strings, numbers).

Example: LLM_MODEL=gpt-4o LOG_LEVEL=DEBUG uvicorn API:app
"""
import os

from dotenv import load_dotenv

env_path = os.path.join(os.path.dirname(__file__), '.env')
load_dotenv(dotenv_path=env_path)

API_KEY = os.getenv("API_KEY")
LLM_ENDPOINT = os.getenv("LLM_ENDPOINT", "https://api.openai.com/v1/chat/completions")
LLM_MODEL = os.getenv("LLM_MODEL", "gpt-4o-mini")
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.2"))
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "1500"))
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "30"))  # seconds

SUGGESTION_LIMIT = int(os.getenv("SUGGESTION_LIMIT", "5"))

# Logging level (DEBUG/INFO/WARNING/ERROR/CRITICAL)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "8000"))
