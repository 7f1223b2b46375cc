# --------------------------------------------------------------
# File: config.py
# Description: Parámetros de entorno para enlaces compartidos y trazas.
# --------------------------------------------------------------
import os
from dotenv import load_dotenv
load_dotenv()

LINK_BASE_URL = os.getenv("LINK_BASE_URL", "localhost:3000")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "")
