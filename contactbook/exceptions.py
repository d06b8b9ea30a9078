"""Contactbook exceptions."""


class BaseError(Exception):
    """
    Structured exception carrying a machine-readable code.

    Subclasses provide ``_default_messages`` so callers may raise with the code
    alone and still get a readable message.
    """

    _default_messages: dict[str, str] = {}

    def __init__(self, code: str, message: str | None = None, **data):
        self.code = code
        self.message = message or self._default_messages.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    def as_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "data": self.data}


class ContactBookError(BaseError):
    """
    Structured exception for contact operations.

    Usage:
        try:
            contact_service.update_contact("abc1234", {"first": "Ana"})
        except ContactBookError as e:
            if e.code == "CONTACT_NOT_FOUND":
                handle_not_found()
    """

    _default_messages = {
        "CONTACT_NOT_FOUND": "Contact not found",
        "INVARIANT_VIOLATION": "Invariant violation",
    }
