"""
repositories/ - Data Access Layer
==================================
Each repository owns the SQL for one LightBnB entity and turns rows into
domain model objects. Driver errors leave this layer as QueryFailedError.
"""
