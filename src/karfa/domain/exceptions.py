"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the console and CLI layers can catch them uniformly and display the
user-facing message.  Every concrete error carries a fixed default message;
a caller may still pass a more specific one.
"""


class DomainException(Exception):
    """Base class for all domain errors."""

    default_message = "Villa kom upp."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EmptyInputError(ValidationError):
    """A required text field was empty or the user declined to answer."""

    default_message = "Gildi má ekki vera tómt."


class MissingNameError(EmptyInputError):
    default_message = "Nafn má ekki vera tómt."


class MissingAddressError(EmptyInputError):
    default_message = "Heimilisfang má ekki vera tómt."


class InvalidIntegerError(ValidationError):
    """Input was not a whole number or fell outside the allowed range."""

    default_message = "Gildi verður að vera heiltala á leyfilegu bili."


class InvalidIdError(InvalidIntegerError):
    default_message = (
        "Auðkenni vöru er ekki löglegt, verður að vera heiltala stærri en 0."
    )


class InvalidQuantityError(InvalidIntegerError):
    default_message = "Fjöldi er ekki löglegur, lágmark 1 og hámark 99."


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    default_message = "Fannst ekki."


class ProductNotFoundError(EntityNotFoundError):
    default_message = "Vara fannst ekki."


class EmptyCartError(DomainException):
    """An operation needs at least one line in the cart."""

    default_message = "Karfan er tóm."
