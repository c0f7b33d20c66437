"""
Vercel serverless entry point.

Vercel's Python runtime serves the WSGI app exported as `app`.
"""

import sys
import os

# Ensure project root is on the Python path so the flat modules resolve
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import app  # noqa: E402,F401
