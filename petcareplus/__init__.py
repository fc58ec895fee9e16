"""
PetCarePlus Backend: Application Package
==========================================

REST backend for a veterinary clinic's records.

Architecture:
    ┌─────────────────────────────────────┐
    │   Routes (API Layer) + auth guards  │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← validation, one statement per call
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← async SQLAlchemy sessions
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
