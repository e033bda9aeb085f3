# src/weathercli/core/settings.py
from __future__ import annotations
import os
from dotenv import load_dotenv

# Environment variables may come from a .env file
load_dotenv()

# Credential file lives in the working directory unless overridden
KEY_FILE = os.getenv("WEATHER_KEY_FILE", "key.txt")

HTTP_TIMEOUT = float(os.getenv("WEATHER_HTTP_TIMEOUT", "3"))
USER_AGENT = os.getenv("WEATHER_USER_AGENT", "weather bot")

LOG_LEVEL = os.getenv("WEATHER_LOG_LEVEL", "WARNING").upper()
