"""Domain layer for salontrack application.

Services are imported from their own modules (``salontrack.domain.sales``
and so on) so that the database layer can import entities from here
without pulling the services in.
"""
