"""
PetCarePlus Backend: Services Package
=======================================

Business logic, independent of HTTP. Each module exposes a class and a
module-level singleton that the routes import:

    - resource_service.py:     shared CRUD workflow (list/get/create/update/delete)
    - owner_service.py:        owner_service
    - pet_service.py:          pet_service
    - appointment_service.py:  appointment_service
    - auth_service.py:         auth_service (login credential + role lookup)
    - weather_service.py:      weather_service (Open-Meteo + WeatherLog)
    - export_service.py:       export_service (owners CSV)

Services receive the request's AsyncSession as an argument and translate
store failures into DatabaseError.
"""
