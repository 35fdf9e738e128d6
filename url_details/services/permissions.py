"""Permission collaborators deciding whether a caller may look up remote URLs."""

from typing import Callable, Iterable

from fastapi import Request

Permission = Callable[[Request], bool]


class RoleHeaderPermission:
    """Allow callers whose role, as asserted by the fronting platform, is in *allowed_roles*.

    The service does not authenticate users itself; it trusts the role header
    set by the gateway in front of it.  Any client that can reach the service
    directly can claim any role, so the gateway must strip this header from
    incoming requests before setting its own.  Deployments without such a
    gateway should inject their own predicate into ``create_app``.
    """

    def __init__(self, header: str, allowed_roles: Iterable[str]) -> None:
        self.header = header
        self.allowed_roles = {role.lower() for role in allowed_roles}

    def __call__(self, request: Request) -> bool:
        role = request.headers.get(self.header, "").strip().lower()
        return bool(role) and role in self.allowed_roles
