"""
db/ - Database Layer
====================
PostgreSQL pool management and the LightBnB schema.
Nothing here knows about users, properties or reservations beyond DDL.
"""
