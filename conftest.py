"""
Root conftest.py - puts the project root on sys.path so tests can import
``poupe_color`` from a source checkout and share ``tests.samples``.
"""
import os
import sys

PROJECT_ROOT = os.path.dirname(os.path.abspath(__file__))

if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)
