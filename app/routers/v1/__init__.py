"""v1.0 router package — all /api/v1.0/* endpoints live here.

Files:
  buildings.py  — building, room, workspace and schedule lookups

Rule: Routers only handle HTTP (request parsing, response shaping).
      All directory logic delegates to app/services/.
"""
