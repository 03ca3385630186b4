"""
Service layer abstraction.

The data-access layer lives here so that HTTP handlers depend on the
``UserStore`` protocol rather than on a particular database.
"""
