"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one resource
(user, leaderboard, status checks).  The routers are aggregated in
``api/router.py``.
"""
