"""
Login Domain Model - Identity and proof sent to the login endpoint.
"""

from dataclasses import dataclass, field
from typing import Dict


@dataclass(frozen=True)
class LoginInfo:
    """
    Login request payload.

    The password is excluded from repr so it never ends up in logs.
    """
    user: str
    password: str = field(repr=False)

    def to_dict(self) -> Dict[str, str]:
        """Wire form expected by the server."""
        return {"User": self.user, "Passwd": self.password}
