"""
Repositories own the SQL.

Each repository opens its own connection per call through
``core.db.get_connection`` and returns Pydantic records from
``schemas``.  Business rules belong in ``services``.
"""
