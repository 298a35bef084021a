"""
Application package initializer.

The portal API is organised the usual way: ``core`` holds settings,
logging, errors and the record store backends, ``schemas`` the
Pydantic payload models, ``services`` the business rules and static
data, and ``api`` the routers that expose them under ``/api``.

The ASGI application is ``intern_portal_api.app.main:app``.  It is not
imported here so that the services and schemas can be used (for
example by ``portal_client``) without building an application.
"""
