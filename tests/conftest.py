"""
tests/conftest.py

Корень проекта в sys.path для импортов core/, solvers/ и т.д.
"""

import os
import sys

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
