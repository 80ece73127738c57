"""
Service layer abstraction.

Each service encapsulates the business rules of a domain on top of a
repository.  Services raise the errors defined in ``core.exceptions``
and leave the HTTP mapping to the API routers.
"""
