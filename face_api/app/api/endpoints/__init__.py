"""
Endpoint subpackage.

Each module in this package defines an APIRouter for one path family
(``/face``, ``/tag`` and ``/due``).  The routers are aggregated in
``api/router.py`` and then included in the main application.
"""
