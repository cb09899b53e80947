"""Domain layer for profitshare application.

Services are imported from their modules (e.g. ``profitshare.domain.summary``)
so that the database layer can import ``profitshare.domain.entities`` without
pulling the services in.
"""
