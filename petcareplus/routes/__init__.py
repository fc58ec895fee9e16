"""
PetCarePlus Backend: API Routes Package
=========================================

Route Inventory:
    - auth.py:          POST /api/login, POST /api/logout
    - owners.py:        GET/POST /api/owners, GET/PUT/DELETE /api/owners/{id}
    - pets.py:          GET/POST /api/pets, GET/PUT/DELETE /api/pets/{id}
    - appointments.py:  GET/POST /api/appointments, GET/PUT/DELETE /api/appointments/{id}
    - weather.py:       POST /api/weather/fetch, GET /api/weather/logs
    - export.py:        GET /api/export/owners.csv

Routes stay thin: declare the guard, hand the body to a service, wrap the
result. Errors are raised as application exceptions and formatted by the
global handlers in main.py.
"""
