"""
Vercel serverless entry point — exposes the SharesView FastAPI app.
"""
import sys, os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sharesview.main import app  # noqa: E402,F401
