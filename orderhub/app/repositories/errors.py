class RepositoryError(Exception):
    """Storage engine failure; the message never carries raw engine text"""


class RepositoryConflictError(RepositoryError):
    """A unique constraint rejected the write"""
