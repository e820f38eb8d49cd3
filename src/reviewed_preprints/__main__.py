"""
Allow running the API server as module: python -m reviewed_preprints
"""

from __future__ import annotations

from .api.server import main

if __name__ == "__main__":
    main()
