import os, sys
from pathlib import Path

# Add project root to sys.path for imports
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

# Keep a developer's .env from changing the backends under test
os.environ["FETCH_BACKEND"] = "http"
os.environ["EXTRACTOR_BACKEND"] = "regex"
os.environ["FETCH_TIMEOUT_SECONDS"] = "10"
