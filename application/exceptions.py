"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers.
Expected outcomes (missing resources, denied access, invalid input) are
reported through use-case results instead.
"""


class RepositoryError(Exception):
    """Persistence failure.

    Raised by infrastructure repositories when the document store cannot
    complete a read or write (connectivity loss, constraint violation,
    malformed response). The route layer reports it as a generic 500.
    """

    pass
