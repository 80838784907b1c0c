"""Role chain — the ordered roles a task is delegated through.

The chain is an injected value rather than a module constant so that
alternate chains can be exercised without touching the engine:

    flow = RoleFlow([Role.OWNER, Role.MANAGER, Role.EMPLOYEE])
    flow.successor(Role.OWNER)     # Role.MANAGER
    flow.successor(Role.EMPLOYEE)  # None (chain-terminal)
"""

from __future__ import annotations

from collections.abc import Iterable

from taskflow.models.user import Role

DEFAULT_ROLE_CHAIN: tuple[Role, ...] = (
    Role.OWNER,
    Role.DIRECTOR,
    Role.MANAGER,
    Role.SUPERVISOR,
    Role.EMPLOYEE,
)


class RoleFlow:
    """Maps each role in an ordered chain to its immediate successor."""

    def __init__(self, roles: Iterable[Role] = DEFAULT_ROLE_CHAIN) -> None:
        chain = tuple(Role(r) for r in roles)
        if not chain:
            raise ValueError("Role chain must contain at least one role.")
        if len(set(chain)) != len(chain):
            raise ValueError(f"Role chain contains duplicate roles: {[r.name for r in chain]}")

        self._chain = chain
        self._next: dict[Role, Role | None] = {
            role: chain[i + 1] if i + 1 < len(chain) else None
            for i, role in enumerate(chain)
        }

    @classmethod
    def from_names(cls, names: Iterable[str]) -> RoleFlow:
        """Build a chain from role names, e.g. ["owner", "director", ...]."""
        roles = []
        for name in names:
            key = name.strip().upper()
            if not key:
                continue
            try:
                roles.append(Role[key])
            except KeyError:
                raise ValueError(f"Unknown role in chain: {name!r}") from None
        return cls(roles)

    @property
    def roles(self) -> tuple[Role, ...]:
        return self._chain

    @property
    def initiator(self) -> Role:
        """The only role allowed to start a chain."""
        return self._chain[0]

    def __contains__(self, role: object) -> bool:
        return role in self._next

    def successor(self, role: Role) -> Role | None:
        """Return the next role, or None when `role` is chain-terminal.

        Raises:
            KeyError: If `role` is not part of this chain.
        """
        return self._next[role]

    def is_terminal(self, role: Role) -> bool:
        return self.successor(role) is None

    def __repr__(self) -> str:
        return f"RoleFlow({' → '.join(r.name for r in self._chain)})"
