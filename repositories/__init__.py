"""
repositories/ - Data Access Layer
==================================
Each repository owns the SQL for one area of the schema, turns rows into
domain models, and raises StoreError whenever psycopg2 reports a failure.
"""
