"""
Video game catalogue application package.

Layered architecture:

  catalogue/repositories/  — pure I/O: reading and writing ``VideoGame`` rows
                             through a SQLAlchemy session.
  catalogue/services/      — business logic: entity <-> projection mapping and
                             the "update only if it exists" rule.
  catalogue/dtos.py        — caller inputs (validated) and public projections.

The Flask routes in ``catalogue_api.py`` build a service per request from a
fresh session and translate service results into HTTP status codes.
"""
