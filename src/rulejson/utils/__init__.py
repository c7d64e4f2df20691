#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Internal helpers for dependency checks and debug timing."""
