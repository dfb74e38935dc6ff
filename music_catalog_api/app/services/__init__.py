"""
Service layer.

Each service encapsulates the rules for one part of the catalog.
Services take the request's ``CatalogStore`` as their first argument,
raise ``RejectionError`` subclasses when a referenced row is missing,
and let ``StoreFault`` propagate untouched.
"""
