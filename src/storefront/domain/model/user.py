"""User profile as seen by the storefront.

Credentials and sign-in live with the identity provider; the storefront
only reads the profile and remembers the last shipping address.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class User:

    id: str
    email: str
    full_name: str = ""
    address: str = ""
    is_admin: bool = False
