"""Pydantic schemas package.

Folder intent:
  common.py    — CamelModel base + HealthResponse (all schemas inherit CamelModel)
  building.py  — Building lists, detail, search results, distance query
  place.py     — PlaceFilter, ExchangePlace, paged place listings
  schedule.py  — Workspace reserved / available percentages
  catalog.py   — JSON catalog document imported into the directory mirror
"""
