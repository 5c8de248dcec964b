# Services package init
"""
Acadex Backend — Services Layer
=================================

Service Inventory:
    - routine_parser: OCR text → RoutineEvent list (pure)
    - calendar_projector: RoutineEvent list → CalendarEvent list for one week (pure)
    - RoutineService: Applies configuration, limits and the wall clock around both

The two pure modules take no settings and read no clock; only
RoutineService touches either.
"""
