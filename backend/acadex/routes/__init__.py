# Routes package init
"""
Acadex Backend — API Routes Package
=====================================

Route Inventory:
    - routine.py: POST /api/routine/ingest          (OCR text → events)
                  POST /api/routine/calendar        (events → calendar week)
                  POST /api/routine/events/remove   (drop event by id)
    - health.py:  GET  /health                      (service health check)

Routes stay thin: extract the body, call RoutineService, return the model.
"""
