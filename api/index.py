import sys
import os

# Add the root directory to the path so that 'app' can be imported
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.config import get_settings
from app.main import app
from app.utils.logging import configure_logging

configure_logging(get_settings().LOG_LEVEL)

# Serverless hosts look up the ASGI app under this name
handler = app
