from __future__ import annotations


class PlayerDirectoryError(Exception):
    """Base for every client-visible failure. Carries the HTTP status it maps to."""

    status_code = 400

    def __init__(self, detail: str, errors: list[str] | None = None) -> None:
        super().__init__(detail)
        self.detail = detail
        self.errors = list(errors or [])

    def to_body(self) -> dict:
        return {"detail": self.detail, "errors": self.errors}


class StructuralError(PlayerDirectoryError):
    """Malformed identifier or wrongly typed request part."""

    status_code = 400


class ValidationError(PlayerDirectoryError):
    status_code = 400

    def __init__(self, errors: list[str]) -> None:
        super().__init__("Invalid player data: " + ", ".join(errors), errors)


class ConflictError(PlayerDirectoryError):
    status_code = 400

    def __init__(self, field: str) -> None:
        super().__init__(f"A player with this {field} already exists", ["Duplicate" + field[0].upper() + field[1:]])
        self.field = field


class AuthorizationError(PlayerDirectoryError):
    status_code = 403

    def __init__(self, detail: str = "Insufficient privileges") -> None:
        super().__init__(detail, ["Forbidden"])


class NotFoundError(PlayerDirectoryError):
    status_code = 404

    def __init__(self, player_id: int) -> None:
        super().__init__("Player not found", ["NotFound"])
        self.player_id = player_id


class AuthenticationError(PlayerDirectoryError):
    status_code = 401

    def __init__(self, detail: str = "Missing or invalid token") -> None:
        super().__init__(detail, ["Unauthenticated"])
