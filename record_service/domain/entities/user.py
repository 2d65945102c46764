"""The User entity as a plain dataclass."""

from dataclasses import dataclass


@dataclass
class User:
    """Core domain entity representing a stored user record.

    The password is kept exactly as submitted; hashing is not part of this
    service's contract.
    """

    name: str
    email: str
    password: str
    id: int | None = None
