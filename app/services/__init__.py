"""Services package — all directory logic lives here, never in routers.

Files:
  directory.py  — BuildingsService: building, place and schedule queries
  catalog.py    — JSON catalog import into the directory mirror

Rule: routers call services, services call repositories, repositories call the DB.
      No SQLAlchemy queries in routers. No FastAPI imports in services.
"""
