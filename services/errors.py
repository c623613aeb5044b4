"""
Erros do motor de inventário.
Cada erro carrega a mensagem legível e o status HTTP usado pelo app.
"""


class InventoryError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class DuplicateShelf(InventoryError):
    status_code = 400


class DuplicateUser(InventoryError):
    status_code = 400


class NotFound(InventoryError):
    status_code = 404


class PositionNotFound(InventoryError):
    status_code = 404


class PositionAlreadyOccupied(InventoryError):
    status_code = 409


class ValidationError(InventoryError):
    status_code = 422


class AuthenticationError(InventoryError):
    status_code = 401
