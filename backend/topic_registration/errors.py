"""
Exceptions métier de l'API.
Chaque exception porte son code HTTP et le message renvoyé au client
sous la forme {"error": message}.
"""


class ApiError(Exception):
    status_code = 500
    default_message = "internal server error"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ApiError):
    """Champ obligatoire absent, identifiant non entier ou corps illisible."""
    status_code = 400
    default_message = "invalid request"


class ConflictError(ApiError):
    """Nom déjà utilisé. Renvoyé en 400 comme l'API historique."""
    status_code = 400
    default_message = "name already in use"


class NotFoundError(ApiError):
    """Cible absente sur une mise à jour. Renvoyé en 400, pas en 404."""
    status_code = 400
    default_message = "not found"


class AuthenticationError(ApiError):
    status_code = 401
    default_message = "token missing or invalid"


class AuthorizationError(ApiError):
    status_code = 403
    default_message = "admin privileges required"


class InternalError(ApiError):
    status_code = 500
    default_message = "internal server error"


class ServiceUnavailableError(ApiError):
    """La base n'est pas encore joignable (phase de démarrage)."""
    status_code = 503
    default_message = "database not ready"
